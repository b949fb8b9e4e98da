import pytest

from listscript.interpreter import Interpreter
from listscript.reader.parser import parse
from listscript.types.node import Boolean, Def, Error, ErrorKind, Number, make_function


# ------------------ def ------------------

def test_variable_def_binds_and_returns_value(interp):
    assert interp.eval("def x 10") == Number(10)
    assert interp.eval("x") == Number(10)
    assert interp.eval("def y +(x 5)") == Number(15)


def test_function_def_returns_true_and_binds_the_def_node(interp):
    assert interp.eval("def inc args(n) list(+ n 1)") == Boolean(True)
    fn = interp.env.lookup("inc")
    assert isinstance(fn, Def) and fn.is_function
    assert interp.eval("inc(41)") == Number(42)


def test_redefinition_shadows(interp):
    interp.eval("def x 1")
    interp.eval("def x 2")
    assert interp.eval("x") == Number(2)


def test_def_of_error_binds_the_error(interp):
    result = interp.eval("def e missing")
    assert result == Error("Undefined symbol 'missing'", ErrorKind.UNDEFINED_SYMBOL)
    assert interp.env.lookup("e") == result


def test_def_inside_function_is_local_to_the_call(interp):
    interp.eval("def f args(a) list(def inner +(a 1) inner)")
    assert interp.eval("f(1)") == interp.eval("list(2 2)")
    assert interp.eval("inner").kind is ErrorKind.UNDEFINED_SYMBOL


def test_def_inside_top_level_list_is_global(interp):
    interp.eval("list(def z 3)")
    assert interp.eval("z") == Number(3)


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("if true 1 2", "1"),
        ("if false 1 2", "2"),
        ("if list(> 10 100) list(1) list(0)", "list(0)"),
        ("if <(1 2) data(yes) data(no)", "data(yes)"),
        ("list(if true 1 2)", "1"),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("cond", ["5", '"yes"', "list()", "data(1)"])
def test_if_condition_must_be_boolean(interp, cond):
    assert interp.eval(f"if {cond} 1 2") == Error(
        "'if' condition must be a boolean", ErrorKind.TYPE_ERROR
    )


def test_if_propagates_condition_error(interp):
    assert interp.eval("if nope 1 2").kind is ErrorKind.UNDEFINED_SYMBOL


def test_if_evaluates_only_one_branch(interp, capsys):
    assert interp.eval("if true write(1) write(2)") == Boolean(True)
    assert capsys.readouterr().out == "1\n"
    interp.eval("if false write(1) write(2)")
    assert capsys.readouterr().out == "2\n"


# ------------------ functions ------------------

def test_factorial(interp):
    interp.eval("def factorial args(x) list(if list(eq? x 1) 1 list(* x list(factorial list(- x 1))))")
    assert interp.eval("factorial(5)") == Number(120)
    assert interp.eval("factorial(10)") == Number(3628800)


def test_fibonacci(interp):
    interp.eval("def fib args(n) list(if list(< n 2) n list(+ fib(-(n 1)) fib(-(n 2))))")
    assert interp.eval("fib(15)") == Number(610)


def test_user_function_arity(interp):
    interp.eval("def add args(a b) +(a b)")
    expected = Error("Arity mismatch in user-defined function", ErrorKind.ARITY_MISMATCH)
    assert interp.eval("add(1)") == expected
    assert interp.eval("add(1 2 3)") == expected


def test_zero_argument_function(interp):
    interp.eval("def answer args() 42")
    assert interp.eval("answer()") == Number(42)


def test_argument_errors_propagate_before_the_call(interp, capsys):
    interp.eval("def loud args(a) write(a)")
    assert interp.eval("loud(nope)").kind is ErrorKind.UNDEFINED_SYMBOL
    assert capsys.readouterr().out == ""


def test_scoping_is_dynamic(interp):
    # g has no y of its own: it sees the y bound by its caller f
    interp.eval("def g args() +(y 1)")
    interp.eval("def f args(y) g()")
    assert interp.eval("f(41)") == Number(42)
    assert interp.eval("g()").kind is ErrorKind.UNDEFINED_SYMBOL


def test_parameters_shadow_globals_only_during_the_call(interp):
    interp.eval("def n 100")
    interp.eval("def twice args(n) *(n 2)")
    assert interp.eval("twice(4)") == Number(8)
    assert interp.eval("n") == Number(100)


def test_function_sees_its_own_name_for_recursion(interp):
    body = parse("if list(eq? n 0) 0 list(+ n list(hidden list(- n 1)))")
    fn = make_function("hidden", ["n"], body)
    interp.scope.env = interp.env.define("alias", fn)
    assert interp.eval("alias(4)") == Number(10)
    assert interp.eval("hidden").kind is ErrorKind.UNDEFINED_SYMBOL


def test_functions_are_values(interp):
    interp.eval("def sq args(n) *(n n)")
    interp.eval("def apply1 args(f v) f(v)")
    assert interp.eval("apply1(sq 9)") == Number(81)


# ------------------ recursion limit ------------------

def test_recursion_limit_is_an_error_value():
    interp = Interpreter(max_depth=20)
    interp.eval("def forever args(n) forever(+(n 1))")
    assert interp.eval("forever(0)") == Error("Maximum recursion depth exceeded", ErrorKind.RECURSION_LIMIT)
    # the interpreter is still usable afterwards
    assert interp.eval("+(1 1)") == Number(2)


def test_recursion_within_the_limit_succeeds():
    interp = Interpreter(max_depth=50)
    interp.eval("def down args(n) list(if list(eq? n 0) 0 down(-(n 1)))")
    assert interp.eval("down(40)") == Number(0)
    assert interp.eval("down(60)").kind is ErrorKind.RECURSION_LIMIT
