"""Uses lcterm to reduce λ-terms read from a file, or run in command-line mode. Also uses error handling context
manager. Called from the lcterm console script.
"""

import argparse

from lcterm.lang.error import ErrorHandler
from lcterm.lang.session import Session
from lcterm.lang.shell import Shell
from lcterm.pure.reduction import Order


def main(argv=None):
    """Runs lcterm interpreter. Called from lcterm console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lcterm", description="Untyped lambda calculus interpreter.")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-o", "--order", help="evaluation order (default: normal)", default=Order.NORMAL.value,
                            choices=[order.value for order in Order])
        parser.add_argument("-n", "--max-steps", help="give up reducing a term after this many steps", type=int)
        parser.add_argument("-t", "--trace", help="print every reduction step", action="store_true")
        args = parser.parse_args(argv)

        error_handler.verbose = args.trace
        order = Order.parse(args.order)

        if args.file is not None:
            sess = Session(error_handler, args.file, order, args.max_steps, cmd_line=False)
            sess.run()

            for result in sess.results:
                print(result)

        else:
            Shell(Session(error_handler, Session.SH_FILE, order, args.max_steps, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
