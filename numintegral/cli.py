"""Single-run driver: ``numintegral <functionid> <a> <b> <n> <intensity>``.

Prints the midpoint-rule result (15 significant digits) and the seconds spent
integrating (6 decimals), separated by a space.
"""

import os
import sys

from numintegral.errors import IntegralError, UsageError
from numintegral.functions import DEFAULT_INTEGRANDS
from numintegral.integral_core import format_result, parse_request, run_request

N_ARGS = 5


def usage(prog: str) -> str:
    return f"usage: {prog} <functionid> <a> <b> <n> <intensity>"


def main(argv=None, integrands=DEFAULT_INTEGRANDS) -> int:
    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else "numintegral"
    args = argv[1:]

    try:
        if len(args) < N_ARGS:
            raise UsageError(usage(prog))
        request = parse_request(args[:N_ARGS])
    except UsageError as e:
        print(e, file=sys.stderr)
        return -1
    except IntegralError as e:
        print(f"Error: {e}", file=sys.stderr)
        return -1

    # only the integration is timed, parsing and printing are not
    result = run_request(request, integrands)
    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
