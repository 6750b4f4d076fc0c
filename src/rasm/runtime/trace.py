from typing import List

import rasm.common.conf as cf
from rasm.runtime.context import ExecutionResult


def format_state(result: ExecutionResult) -> List[str]:
    lines = ['stack: [']
    lines.extend(f'{cf.TRACE_INDENT}{value}' for value in result.stack)
    lines.extend(['],', 'registers: {'])
    lines.extend(f'{cf.TRACE_INDENT}{name}: {value}' for name, value in result.registers.items())
    lines.append('}')
    return lines


def format_errors(result: ExecutionResult) -> List[str]:
    return [f'{cf.ERROR_PREFIX}{error}' for error in result.errors]


def format_info(result: ExecutionResult) -> List[str]:
    return [f'{cf.INFO_PREFIX}{message}' for message in result.output]


def format_trace(result: ExecutionResult) -> str:
    if result.compiled:
        lines = format_state(result)
    else:
        lines = format_errors(result)

    lines.append(cf.TRACE_SEPARATOR)
    lines.extend(format_info(result))
    return '\n'.join(lines) + '\n'
