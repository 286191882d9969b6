from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .engine import ExpressionEngine
from .keys import keystrokes, map_key
from .lexer import Lexer, tokenize
from .reducer import RESULT_PREFIX
from .session import Calculator
from .shunting import to_postfix
from .state import (Append, Clear, ClearHistory, Delete, Evaluate,
                    SwitchDestination, UseHistoryEntry)
from .util import EvaluationError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # History doesn't outlive the process.
                                    history=InMemoryHistory(),
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    COMMANDS = {
        ':clear': Clear,
        ':delete': Delete,
    }

    def dumper(self):
        '''
        Dump tokens, precedence, and postfix order of each expression.
        '''
        print('<kind>\t<lexeme>\t<precedence>')
        for line in self.args.expressions:
            try:
                tokens = tokenize(line.strip())
                postfix = to_postfix(tokens)
            except EvaluationError as e:
                print(e, file=sys.stderr)
                continue
            for token in tokens:
                precedence = getattr(token.value, 'precedence', '')
                print(token.kind.value, repr(str(token)), precedence,
                      sep='\t')
            print('postfix', ' '.join(map(str, postfix)), sep='\t')

    def executor(self):
        '''
        Evaluate each expression on its own and print its result.
        '''
        engine = ExpressionEngine()
        for line in self.args.expressions:
            result = engine.evaluate(line)
            if result.ok:
                print(result)
            else:
                print(result, file=sys.stderr)

    def repl(self):
        '''
        Drive a calculator session, one line at a time.

        Lines are typed into the calculator and evaluated. Lines starting
        with : are commands.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if line == ':quit':
                return
            elif line.startswith(':'):
                self.command(line)
            else:
                self.enter(line)

    def enter(self, line):
        '''
        Type a line into the calculator, then press enter.
        '''
        state = self.calculator.state
        # Re-evaluating a result would only clutter the history.
        if not line and \
           state.last_result == RESULT_PREFIX + state.current_expression:
            return
        intents = [map_key(key) or Append(key) for key in keystrokes(line)]
        if not intents or not isinstance(intents[-1], Evaluate):
            intents.append(Evaluate())
        for intent in intents:
            self.calculator.dispatch(intent)
        self.show()

    def command(self, line):
        '''
        Run a : command against the calculator.
        '''
        name, _, argument = line.partition(' ')
        logger.debug('Command %s %r', name, argument)
        if name in type(self).COMMANDS:
            self.calculator.dispatch(type(self).COMMANDS[name]())
            self.show()
        elif name == ':clear-history':
            self.calculator.dispatch(ClearHistory())
        elif name in {':history', ':calculator'}:
            self.calculator.dispatch(SwitchDestination(name[1:]))
            if name == ':history':
                self.print_history()
        elif name == ':use':
            try:
                entry = self.calculator.history[int(argument) - 1]
            except (ValueError, IndexError):
                print('No such history entry {!r}'.format(argument),
                      file=sys.stderr)
                return
            self.calculator.dispatch(UseHistoryEntry(entry.id))
            self.show()
        else:
            print('Unknown command {!r}'.format(name), file=sys.stderr)

    def show(self):
        '''
        Print the expression being edited, or the error.
        '''
        state = self.calculator.state
        if state.error_message is not None:
            print(state.error_message, file=sys.stderr)
        elif state.current_expression:
            print(state.current_expression)

    def print_history(self):
        '''
        Print history entries, newest first, numbered for :use.
        '''
        for n, entry in enumerate(self.calculator.history, start=1):
            print(n, entry.expression, entry.result, sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _toolbar(self):
        return self.calculator.display[1]

    def _prompting_input(self):
        '''
        Return prompting input instead of plain stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=self._toolbar)
        else:
            return sys.stdin

    def __init__(self, calculator=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.calculator = calculator or Calculator()
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=None,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=type(self).LOG_FORMAT,
        )
        if self.args.action is None:
            # Standalone expressions, or a session on stdin.
            if self.args.expressions is None:
                self.args.action = self.repl
            else:
                self.args.action = self.executor
        if self.args.expressions is None and \
           self.args.action != self.raw_grammar:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
