from __future__ import annotations

from _infra import Stack, banner, run

from stateflow import State, do, strict


def push(item: int) -> State[Stack, None]:
    return strict.modify(lambda stack: stack.push(item))


def pop() -> State[Stack, int]:
    # Locality: a plain function S -> (S, A), wrapped once.
    return State(lambda stack: stack.pop())


@do
def add_top_two():
    a = yield pop()
    b = yield pop()
    yield push(a + b)
    return a + b


def main() -> None:
    banner("01_quickstart: push/pop + do + sequence + foldM")

    program = (
        strict.sequence([push(1), push(2), push(3)])
        .then_(add_top_two())
        .then(lambda total: strict.discard(pop()).map(lambda top: (total, top)))
    )
    stack, (total, top) = strict.run_state(program, Stack())
    print(f"stack={stack.items} total={total} top={top}")

    summed = strict.foldM(lambda acc, x: push(x).then_(strict.inject(acc + x)), 0, [4, 5, 6])
    print(strict.run_state(summed, Stack()))


if __name__ == "__main__":
    run(main)
