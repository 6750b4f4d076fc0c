import sys
import json
import logging as lg
import traceback
from pathlib import Path
from typing import Any

import click

import rasm.common.conf as cf
import rasm.runtime.context as context
from rasm.runtime.trace import format_trace


class Settings:
    verbose: bool
    produce_json: bool

    def __init__(self):
        self.verbose = False
        self.produce_json = False

    def update(self, verbose: bool | None = None, produce_json: bool | None = None):
        if verbose is not None:
            self.verbose = verbose

        if produce_json is not None:
            self.produce_json = produce_json

        return self


def eprint(*args: Any, **kwargs: Any):
    print(*args, file=sys.stderr, **kwargs)


def run_file(settings: Settings, source: Path) -> context.ExecutionResult:
    program = source.read_text(encoding=cf.SOURCE_ENCODING)
    result = context.execute(program)

    if settings.produce_json:
        eprint('------------------ STATE ---------------------')
        eprint(json.dumps(result.json(), indent=2))

    click.echo(format_trace(result), nl=False)
    return result


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--produce-json', is_flag=True, help='Dump final state as JSON to stderr')
@click.argument('source', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def run(ctx: click.Context, source: Path, **params):
    ctx.ensure_object(Settings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info(f'Running {source.name}')

    try:
        result = run_file(ctx.obj, source)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(cf.EXIT_EXEC_ERROR)

    sys.exit(cf.EXIT_COMPILED if result.compiled else cf.EXIT_ERRORS)


if __name__ == '__main__':
    run()
