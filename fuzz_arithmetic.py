import math
import random
import re
import string
import warnings

from listcalc.runtime import calculate

warnings.filterwarnings("ignore")


def eval_py(line: str) -> float | str:
    try:
        return float(eval(line))
    except ZeroDivisionError:
        return "division by zero"
    except Exception as e:
        return str(e)


def eval_my(line: str) -> float | str:
    try:
        res = calculate(line)
    except Exception as e:
        return str(e)
    return "division by zero" if math.isinf(res) or math.isnan(res) else res


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/"

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        line = generate(10)

        if re.findall(r"\*\*", line):
            continue  # avoid generating powers (10**4)

        if re.findall(r"//", line):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"-\(", line):
            continue  # unary minus only ever negates the next number literal

        res_py = eval_py(line)
        res_my = eval_my(line)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py, abs_tol=1e-9):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{line!r}\npy: {res_py}\nmy: {res_my}\n\n")
