"""
Callable and coroutine leaf guards.

Distinguish plain functions from coroutine, generator and async generator
functions, and recognise the objects those produce.
"""

import inspect

from shapeguard.guards.factory import create_guard


def _is_plain_function(value: object) -> bool:
    if not (
        inspect.isfunction(value)
        or inspect.ismethod(value)
        or inspect.isbuiltin(value)
    ):
        return False
    return not (
        inspect.iscoroutinefunction(value)
        or inspect.isgeneratorfunction(value)
        or inspect.isasyncgenfunction(value)
    )


is_function = create_guard(_is_plain_function, "function")

is_async_function = create_guard(inspect.iscoroutinefunction, "async function")

is_generator_function = create_guard(
    inspect.isgeneratorfunction, "generator function"
)

is_async_generator_function = create_guard(
    inspect.isasyncgenfunction, "async generator function"
)

is_generator = create_guard(inspect.isgenerator, "generator")

is_async_generator = create_guard(inspect.isasyncgen, "async generator")

is_awaitable = create_guard(inspect.isawaitable, "awaitable")
