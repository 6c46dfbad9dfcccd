import pytest

from dsakit.stacks import (
    BoundedStack,
    MaxStack,
    StackOverflowError,
    StackUnderflowError,
    infix_to_postfix,
    reverse_string,
)


def test_bounded_stack_iterates_top_down():
    stack = BoundedStack(5, [1, 2, 3])
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3
    assert stack.top() == 3


def test_bounded_stack_push_pop_round_trip():
    stack = BoundedStack(4)
    for value in [10, 20, 30]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [30, 20, 10]
    assert stack.is_empty()


def test_bounded_stack_overflow():
    stack = BoundedStack(2, [1, 2])
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_bounded_stack_too_many_initial_values():
    with pytest.raises(StackOverflowError):
        BoundedStack(2, [1, 2, 3])


def test_bounded_stack_underflow():
    stack = BoundedStack(3)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.top()
    assert stack.is_empty() is True
    assert stack.is_full() is False


def test_bounded_stack_peek():
    stack = BoundedStack(5, [1, 2, 3])
    assert stack.peek(0) == stack.top()
    assert [stack.peek(i) for i in range(3)] == list(stack)
    with pytest.raises(IndexError):
        stack.peek(3)
    with pytest.raises(IndexError):
        stack.peek(-1)


def test_max_stack_driver_sequence():
    stack = MaxStack()
    stack.push(3)
    stack.push(5)
    assert stack.maximum() == 5
    stack.push(7)
    stack.push(19)
    assert stack.maximum() == 19
    assert stack.pop() == 19
    assert stack.maximum() == 7
    assert stack.pop() == 7
    assert stack.peek() == 5
    assert len(stack) == 2


def test_max_stack_empty_raises():
    stack = MaxStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()
    with pytest.raises(StackUnderflowError):
        stack.maximum()


def test_max_stack_push_pop_sequence():
    stack = MaxStack()
    pushes = [4, 1, 9, 9, 2, 12, -3]
    maxima = [4, 4, 9, 9, 9, 12, 12]
    for value, expected in zip(pushes, maxima):
        stack.push(value)
        assert stack.maximum() == expected
        assert stack.peek() == value
    assert len(stack) == len(pushes)
    for value, expected in zip(reversed(pushes), reversed(maxima)):
        assert stack.maximum() == expected
        assert stack.pop() == value
    assert len(stack) == 0


def test_reverse_string_example():
    assert reverse_string("GeeksQuiz") == "ziuQskeeG"


@pytest.mark.parametrize("text", ["", "a", "hello world", "racecar"])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_infix_to_postfix_example():
    assert infix_to_postfix("A*B+C-D") == "AB*C+D-"


def test_infix_to_postfix_operands_only():
    assert infix_to_postfix("ABC") == "ABC"


def test_infix_to_postfix_keeps_operand_order():
    result = infix_to_postfix("A+B*C/D-E")
    operands = [c for c in result if c.isalpha()]
    assert operands == ["A", "B", "C", "D", "E"]
    assert sorted(result) == sorted("A+B*C/D-E")