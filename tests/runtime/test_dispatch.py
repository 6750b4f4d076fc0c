import pytest

from rasm.runtime.context import Context, execute
from rasm.runtime.instructions import default_table

from fixtures import with_context, with_table, with_stack_only  # noqa: F401


def test_mov_then_add():
    result = execute('mov a, 10\nadd a, 5')

    assert result.registers == {'a': 15}
    assert result.compiled


@pytest.mark.parametrize('n', [0, 1, 42, 2 ** 70])
def test_push_pop_roundtrip(n):
    result = execute(f'push 3\npush {n}\npop r')

    assert result.registers['r'] == n
    assert result.stack == [3]


def test_balanced_push_pop_restores_stack():
    result = execute('\n'.join([
        'push 1',
        'push 2',
        'mov x, 7',
        'push x',
        'push 9',
        'pop y',
        'push y',
        'pop y',
        'pop z',
    ]))

    assert result.stack == [1, 2]
    assert result.compiled


def test_unknown_instruction():
    result = execute('unknowninstr x')

    assert result.errors == ['Unknown instruction "unknowninstr"']
    assert result.registers == {}
    assert result.stack == []
    assert not result.compiled


def test_wrong_arity_reports_and_keeps_register():
    result = execute('mov a, 1\nmov a, b, c')

    assert result.errors == ["No matching operand pattern for \"mov\" with operands ['a', 'b', 'c']"]
    assert result.registers == {'a': 1}


def test_known_mnemonic_wrong_types():
    result = execute('push 1\npop 5\nadd 1, a')

    assert len(result.errors) == 2
    assert all(e.startswith('No matching operand pattern') for e in result.errors)
    assert result.stack == [1]


def test_uninitialized_register_reads():
    result = execute('mov a, b\nadd c, 1\npush d\nprint e')

    assert result.errors == [
        'Uninitialized register "b"',
        'Uninitialized register "c"',
        'Uninitialized register "d"',
        'Uninitialized register "e"',
    ]
    assert result.registers == {}
    assert result.stack == []
    assert result.output == []


def test_uninitialized_source_leaves_target():
    result = execute('mov a, 4\nadd a, b\nsub a, b')

    assert result.registers == {'a': 4}
    assert len(result.errors) == 2


def test_pop_empty_stack():
    result = execute('mov r, 3\npop r')

    assert result.errors == ['Pop from empty stack']
    assert result.registers == {'r': 3}


def test_errors_do_not_halt():
    result = execute('bad\nmov a, 2\npop a\nprint a\nworse 1')

    assert result.errors == [
        'Unknown instruction "bad"',
        'Pop from empty stack',
        'Unknown instruction "worse"',
    ]
    assert result.output == ['2']
    assert result.registers == {'a': 2}


def test_print():
    result = execute('mov a, 12\nprint a\nprint 007')

    assert result.output == ['12', '007']


def test_sub_goes_negative():
    result = execute('mov a, 1\nsub a, 5')

    assert result.registers == {'a': -4}


def test_blank_lines_are_skipped():
    result = execute('\n\n  \nmov a, 1\n\n\t\nmov b, a\n\n')

    assert result.compiled
    assert result.registers == {'a': 1, 'b': 1}


def test_compiled_flag():
    assert execute('').compiled
    assert execute('mov a, 1').compiled
    assert not execute('mov a, 1\nmov 1, a').compiled


def test_context_use_line(with_context):  # noqa: F811
    with_context.use('push 5')
    with_context.use('pop q')

    assert with_context.registers == {'q': 5}
    assert with_context.stack == []
    assert with_context.output.should_compile()


def test_context_uses_default_table():
    assert Context().table is default_table()


def test_injected_table(with_stack_only):  # noqa: F811
    result = execute('push 1\nmov a, 2\npop b\nprint b', with_stack_only)

    assert result.errors == ['Unknown instruction "mov"', 'Unknown instruction "print"']
    assert result.registers == {'b': 1}


def test_result_json():
    data = execute('push 1\nmov a, 2\nprint a').json()

    assert data == {
        'Compiled': True,
        'Stack': [1],
        'Registers': {'a': 2},
        'Errors': [],
        'Output': ['2'],
    }


def test_non_ascii_lines_are_unknown():
    result = execute('€ 5\nmové a, 1\nmov a, 1')

    assert result.errors == ['Unknown instruction "€"', 'Unknown instruction "mové"']
    assert result.registers == {'a': 1}
