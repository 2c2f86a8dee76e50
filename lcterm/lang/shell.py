"""Handles interactive/command-line mode for lcterm. Uses cmd as backend."""

import cmd

from lcterm.pure.reduction import Order


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary lcterm statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(self._tmp_line + line, self.line_num, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line + " "
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                if not line.strip():
                    return  # comment-only line

                self.sess.add(line, self.line_num)
                self.sess.run()

                if self.sess.results:
                    print(self.sess.pop())

    def do_help(self, arg):
        """Prints a short introduction to the syntax and the shell commands."""
        print("Welcome to the lcterm interpreter!\n\n"
              "Lambda calculus is a Turing-complete language created by Alonzo Church. This \n"
              "interpreter supports pure lambda calculus and named terms. Abstractions are \n"
              "written 'λx.x', '\\x.x' or '$x -> x', and 'λx, y.x' is short for 'λx.λy.x'.\n\n"
              "Try it out by typing 'I := λx.x'. This will bind the lambda term 'λx.x' to a \n"
              "name 'I'. Next, try typing 'I y'. This will apply 'I' to 'y', giving 'y' as \n"
              "the result.\n\n"
              "'order' shows the evaluation order, 'order lazy' changes it (normal, \n"
              "applicative or lazy).")

    def do_order(self, arg):
        """Shows or changes the evaluation order."""
        with self.sess.error_handler:
            if arg.strip():
                self.sess.order = Order.parse(arg)
            print(self.sess.order.value)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
