from time import sleep, perf_counter

from certes import (
    Settings, configure_logging,
    generate, iterate, drop, prepend, take, take_eager, collect,
    compose, flip, find_last, index_of, reduce_right,
)


def expensive_square(i):
    # Simulate a costly step so laziness is visible
    print(f"  computing f({i}) ...")
    sleep(0.2)
    return i * i


configure_logging(Settings(log_level="INFO"))

print("\n--- Demo: laziness (no work until iterated) ---")
squares = generate(expensive_square)
pipeline = take(5)(drop(3)(squares))
print("Constructed pipeline. No output yet (nothing computed).")

print("\nIterating (should compute exactly 8 values: 3 dropped, 5 kept):")
t0 = perf_counter()
out = collect(pipeline)
t1 = perf_counter()
print(f"Result: {out}")
print(f"Time: {t1 - t0:.2f}s\n")

print("--- Demo: every traversal restarts at index 0 ---")
naturals = generate(lambda i: i)
print(f"First pass:  {take_eager(4)(naturals)}")
print(f"Second pass: {take_eager(4)(naturals)}\n")

print("--- Demo: prepend and chaining ---")
powers = iterate(lambda x: x * 2)(1)
print(f"Powers of two with a header: {powers.prepend(['start']).take(6).to_list()}\n")

print("--- Demo: combinators and list helpers ---")
minus = lambda a: lambda b: a - b
print(f"flip(minus)(1)(10) = {flip(minus)(1)(10)}")
inc_then_double = compose(lambda x: x * 2)(lambda x: x + 1)
print(f"compose(double)(inc)(4) = {inc_then_double(4)}")
data = [1, 2, 3, 4, 5]
print(f"find_last(even)({data}) = {find_last(lambda x: x % 2 == 0)(data)}")
print(f"index_of(53)({data}) = {index_of(53)(data)}")
print(f"reduce_right(concat)('')(abc) = {reduce_right(lambda acc, s: acc + s)('')(['a', 'b', 'c'])!r}")
