from listcalc.errors import CalculatorError
from listcalc.runtime import trace

for line in [
    "5",
    "-1",
    "1+1",
    "-1+1",
    "1+-1",
    "4+6*3",
    "(4+6)",
    "(4+6)*3",
    "80225/-2",
    "7/6/2000",
    "1+2*3+4/2-5",
    "((2+3)*4)",
    "(1+(2*(3+(4/2))))",
    "1/0",
    "0/0",
    "5^2",
    "(1+2",
    "1+2)",
    "2*",
]:
    print("=" * 10)
    print(f"line: {line!r}")
    try:
        stages = trace(line)
    except CalculatorError as e:
        print(e)
        continue

    for stage, rendered in stages:
        print(f" {stage:>15}: {rendered}")
