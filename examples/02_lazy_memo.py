from __future__ import annotations

import logging

from _infra import banner, run

from stateflow import MemoPolicy, lazy, strict


def expensive_plan(name: str) -> strict.State[list[str], str]:
    print(f"  building plan {name!r}")
    return strict.modify(lambda log: log + [name]).then_(strict.inject(name))


def main() -> None:
    banner("02_lazy_memo: inert construction + single force")
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    plan = lazy.defer(lambda: expensive_plan("warmup"), policy=MemoPolicy(thread_safe=False))
    pipeline = lazy.sequence([plan, plan, lazy.gets(len)])
    print("built, nothing ran yet")

    print(lazy.run_state(pipeline, []))
    print(lazy.run_state(pipeline, ["again"]))


if __name__ == "__main__":
    run(main)
