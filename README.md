# lotools

Small helpers for everyday Python work that need nothing outside the standard
library. They cover searching and reshaping sequences and mappings,
expression-style conditionals, shortcuts for handling exceptions, retries and
debouncing, thread-backed channels and a few collection helpers that run their
callbacks on threads.

All durations are in seconds.

## Installation

```
pip install lotools
```

## Modules

- `lotools.condition`: `ternary`, `ternary_f`, the chainable
  `if_(...)` / `if_f(...)` that return an `IfElse` with `else_if`, `else_if_f`,
  `else_` and `else_f`, and `switch(...)`, which returns a `SwitchCase` with
  `case`, `case_f`, `default` and `default_f`.
- `lotools.functional`: `partial(f, arg1)` fixes the first argument of `f`.
- `lotools.intersect`: `contains`, `every`, `some`, `none` and their `_by`
  forms that take a predicate, plus `intersect`, `difference`, `union` and
  `without`. Results keep the order of the input.
- `lotools.numeric`: `range_`, `range_from`, `range_with_steps`, `clamp`,
  `sum_`, `sum_by`, `mean` and `mean_by`. The mean of integers truncates
  toward zero, and the mean of an empty collection is 0.
- `lotools.find`: `index_of`, `last_index_of`, `find`, `find_index_of`,
  `find_last_index_of`, `find_or_else`, `find_key`, `find_key_by`,
  `find_uniques`, `find_duplicates` and their `_by` forms, `min_`, `max_`,
  `min_by`, `max_by`, `earliest`, `latest`, `earliest_by`, `latest_by`,
  `first`, `last` and their `_or` and `_or_empty` forms, `nth`, `sample` and
  `samples`. When there is nothing to return, these give `None`. `nth`
  raises `IndexError` for an index out of bounds.
- `lotools.errors`: `validate` returns a `ValueError` or `None`. `must` and
  `must0` raise `MustError` when the `err` argument is `False` or an
  exception. `try_`, `try_or`, `try_with_error_value`, `try_catch` and
  `try_catch_with_error_value` swallow exceptions. `errors_as` looks for an
  exception type along the `__cause__` and `__context__` chain.
- `lotools.concurrency`: `synchronize()` returns a `Synchronize`, whose `do`
  runs callbacks one at a time under a lock. A `Synchronize` can also be used
  as a context manager. `async_` runs a function in a thread and returns a
  `concurrent.futures.Future`. `wait_for` and `wait_for_with_context` poll a
  condition until it holds, the timeout passes or a `threading.Event` is set.
  Both return `(iterations, elapsed, found)`.
- `lotools.maps`: `keys`, `uniq_keys`, `values`, `uniq_values`, `has_key`,
  `value_or`, the `pick_by` and `omit_by` families, `entries` / `to_pairs`
  (lists of `Entry(key, value)`), `from_entries` / `from_pairs`, `invert`,
  `assign`, `map_keys`, `map_values`, `map_entries` and `map_to_slice`.
- `lotools.parallel`: `map_`, `for_each`, `times`, `group_by` and
  `partition_by` run their callbacks on a thread pool of at most 32 workers.
  Results keep the input order.
- `lotools.channel`: `Channel` is a closable FIFO shared between threads. It is
  buffered, or unbuffered with capacity 0, and offers `send`, `receive`,
  `close`, `len()` and iteration. The module also provides `slice_to_channel`,
  `channel_to_slice`, `generator`, `buffer`, `buffer_with_timeout`, `fan_in`,
  `fan_out` and `channel_dispatcher`. The dispatching strategies are
  `dispatching_strategy_round_robin`, `_random`, `_first`, `_least`,
  `_most`, and `dispatching_strategy_weighted_random(weights)`.
- `lotools.retry`:
  - `attempt` and `attempt_with_delay` retry until a call stops raising. They
    return the number of calls, and `attempt_with_delay` also returns the
    elapsed time. If every call fails, the last exception is re-raised.
  - `attempt_while` and `attempt_while_with_delay` call a function that
    returns `(error, should_continue)`.
  - `new_debounce` and `new_debounce_by` return `(debounced, cancel)`.
  - `new_transaction()` builds a saga-style `Transaction` with `then` and
    `process`.

## Examples

```python
from lotools.condition import if_, switch
from lotools.intersect import union
from lotools.find import find_duplicates
from lotools.retry import attempt, new_transaction

if_(False, 1).else_if(True, 2).else_(3)             # 2
switch(42).case(1, "a").case(42, "b").default("c")  # "b"
union([0, 1, 2], [2, 10])                           # [0, 1, 2, 10]
find_duplicates([1, 2, 2, 1, 2, 3])                 # [1, 2]

def flaky(i):
    if i < 2:
        raise ValueError("not yet")

attempt(5, flaky)                                   # 3

state = (
    new_transaction()
    .then(lambda s: s + 100, lambda s: s - 100)
    .then(lambda s: s + 21, lambda s: s - 21)
    .process(21)
)
# state == 142
```

If a step of a `Transaction` raises, the steps that completed before it are
rolled back in reverse order. The exception is then re-raised, and its `state`
attribute holds the rolled-back state.

```python
from lotools.channel import slice_to_channel, fan_out, channel_to_slice

copies = fan_out(2, 10, slice_to_channel(10, [1, 2, 3]))
[channel_to_slice(c) for c in copies]               # [[1, 2, 3], [1, 2, 3]]
```

## What it does not include

This package is a library only. It has no command-line tool. Its channels and
parallel helpers use threads inside one process, and it has no asyncio
variants.

## Running the tests

```
pip install -e ".[test]"
pytest
```