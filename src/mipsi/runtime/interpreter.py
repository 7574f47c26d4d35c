import sys
from pathlib import Path
import logging as lg
import traceback
from typing import TextIO

import click

import mipsi.common.conf as cf
from mipsi.runtime.dispatcher import Dispatcher, FAILED
from mipsi.runtime.errors import InterpreterError, MalformedStatement
from mipsi.runtime.program import iter_statements, parse_line
from mipsi.runtime.regfile import RegisterFile, SpecialRegisterFile
from mipsi.runtime.reporter import Reporter


EXIT_OK = 0
EXIT_FAILED = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100

QUIT_COMMANDS = ('quit', 'exit')
DUMP_COMMAND = 'regs'


def create_dispatcher(settings: cf.Settings, stream: TextIO | None = None) -> Dispatcher:
    gp = RegisterFile()
    special = SpecialRegisterFile()

    if settings.init is not None:
        lg.info(f'Loading initial register values from {settings.init}')
        registers, specials = cf.load_initial_values(settings.init)
        gp.update(registers)
        special.update(specials)

    reporter = Reporter(stream, settings.table_format)
    return Dispatcher(gp, special, reporter)


def dump_registers(dispatcher: Dispatcher):
    dispatcher.reporter.report_registers(dispatcher.gp.dump() + dispatcher.special.dump())


def execute(dispatcher: Dispatcher, source: str) -> int:
    ''' Runs every statement of the program, returns the number of failures '''
    failures = 0

    for item in iter_statements(source):
        if isinstance(item, MalformedStatement):
            dispatcher.reporter.report_error(str(item))
            failures += 1
            continue

        if dispatcher.dispatch(item.opcode, item.operands) == FAILED:
            failures += 1

    return failures


def session(dispatcher: Dispatcher, input: TextIO, interactive: bool) -> int:
    failures = 0
    lineno = 0

    while True:
        if interactive:
            click.echo(cf.PROMPT, nl=False)

        line = input.readline()

        if not line:
            break

        lineno += 1
        command = line.strip()

        if command in QUIT_COMMANDS:
            break

        if command == DUMP_COMMAND:
            dump_registers(dispatcher)
            continue

        try:
            parsed = parse_line(lineno, line)
        except MalformedStatement as e:
            dispatcher.reporter.report_error(str(e))
            failures += 1
            continue

        if parsed is not None and dispatcher.dispatch(parsed.opcode, parsed.operands) == FAILED:
            failures += 1

    return failures


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-i', '--init', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='TOML file with initial register values')
@click.option('--dump/--no-dump', default=None, help='Print register files when done')
@click.option('--table-format', type=str, help='tabulate format of the reports')
@click.argument('source', type=Path, required=False)
def run(ctx: click.Context, source: Path | None, **params):
    ctx.ensure_object(cf.Settings)
    settings: cf.Settings = ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
    lg.info('MIPSI')

    try:
        dispatcher = create_dispatcher(settings)

        if source is None:
            stdin = click.get_text_stream('stdin')
            failures = session(dispatcher, stdin, stdin.isatty())
        else:
            failures = execute(dispatcher, source.read_text())

        if settings.dump:
            dump_registers(dispatcher)

        if failures:
            lg.info(f'Execution finished with {failures} failed instruction(s)')
            sys.exit(EXIT_FAILED)

        lg.info('Execution finished')
        sys.exit(EXIT_OK)

    except (InterpreterError, UserWarning) as e:
        lg.error(f'Execution halted: {e}')
        sys.exit(EXIT_FAILED)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
