from mallow.interpreter import Interpreter


def test_tail_recursion_through_if_runs_in_constant_stack():
    """Far deeper than Python's default recursion limit."""
    interp = Interpreter()
    interp.eval("(def! sum-to (fn* (n acc) (if (= n 0) acc (sum-to (- n 1) (+ acc n)))))")
    assert interp.eval("(sum-to 10000 0)") == 50005000


def test_tail_recursion_through_do():
    interp = Interpreter()
    interp.eval("(def! loop-do (fn* (n) (do (+ 1 1) (if (= n 0) :done (loop-do (- n 1))))))")
    assert interp.rep("(loop-do 10000)") == ":done"


def test_tail_recursion_through_let():
    interp = Interpreter()
    interp.eval("(def! loop-let (fn* (n) (let* (m (- n 1)) (if (< m 0) n (loop-let m)))))")
    assert interp.eval("(loop-let 10000)") == 0


def test_mutual_tail_recursion():
    interp = Interpreter(prelude="""
        (def! ev? (fn* (n) (if (= n 0) true (od? (- n 1)))))
        (def! od? (fn* (n) (if (= n 0) false (ev? (- n 1)))))
    """)
    assert interp.eval("(ev? 10001)") is False
    assert interp.eval("(od? 10001)") is True
