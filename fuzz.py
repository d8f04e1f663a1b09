#!/usr/bin/env python3
"""
Random fuzzer for turbotext.
Generates malformed UTF-8 and cross-checks the hand-written codec and the
byte-level fallbacks against Python's own UTF-8 handling.
"""

import argparse
import random
import sys
import time
import traceback
from unittest import mock

import turbotext
from turbotext import flags

# Fuzzing strategies
SAMPLE_TEXT = [
    "plain ascii", "héllo", "Москва", "Њива и љубав", "東京", "𝜋 ≈ 3.14", "ﬁ",
    "<a title=\"Наслов\">текст</a>", "%1$s и %s", "\ufeffBOM", "Ωmega", "日本語テキスト",
]

# Byte shapes that break UTF-8 in different ways
BAD_BYTES = [
    b"\x80",  # stray continuation
    b"\xc0\x80",  # overlong NUL
    b"\xe0\x80\xaf",  # overlong "/"
    b"\xed\xa0\x80",  # encoded surrogate
    b"\xf4\x90\x80\x80",  # past U+10FFFF
    b"\xf8\x88\x80\x80\x80",  # legacy 5-byte form
    b"\xfe", b"\xff",
    b"\xe2\x82",  # truncated 3-byte
    b"\xf0\x9f",  # truncated 4-byte
]


def random_codepoint():
    roll = random.random()
    if roll < 0.4:
        return random.randint(0x20, 0x7E)
    if roll < 0.7:
        return random.randint(0x80, 0x7FF)
    if roll < 0.9:
        cp = random.randint(0x800, 0xFFFF)
        return 0xE000 if 0xD800 <= cp <= 0xDFFF else cp
    return random.randint(0x10000, 0x10FFFF)


def fuzz_valid_text(max_len=40):
    parts = [random.choice(SAMPLE_TEXT) for _ in range(random.randint(0, 3))]
    parts.append("".join(chr(random_codepoint()) for _ in range(random.randint(0, max_len))))
    random.shuffle(parts)
    return "".join(parts).encode("utf-8")


def fuzz_broken_bytes():
    data = bytearray(fuzz_valid_text())
    for _ in range(random.randint(1, 4)):
        position = random.randint(0, len(data))
        data[position:position] = random.choice(BAD_BYTES)
    if data and random.random() < 0.3:
        # Chop somewhere, possibly mid-sequence
        del data[random.randint(0, len(data) - 1):]
    return bytes(data)


def fuzz_random_bytes(max_len=30):
    return bytes(random.randint(0, 255) for _ in range(random.randint(0, max_len)))


def generate_fuzzed_bytes():
    strategy = random.choice([fuzz_valid_text, fuzz_broken_bytes, fuzz_broken_bytes, fuzz_random_bytes])
    return strategy()


def check_input(data):
    """Raise AssertionError on any disagreement."""
    # Strict decode agrees with Python's decoder, BOM aside
    try:
        expected = data.decode("utf-8").replace("\ufeff", "")
    except UnicodeDecodeError:
        expected = None
    try:
        codepoints = turbotext.decode(data, strict=True)
    except turbotext.Utf8Error:
        assert expected is None, f"strict decode rejected valid input {data!r}"
    else:
        assert expected is not None, f"strict decode accepted invalid input {data!r}"
        assert codepoints == [ord(char) for char in expected]

    # Lenient decode never raises
    errors = []
    turbotext.decode(data, errors=errors)
    assert all(isinstance(error, turbotext.Utf8Error) for error in errors)

    repaired = turbotext.bad_byte_repair(data, b"?")
    repaired.decode("utf-8")
    assert turbotext.check(repaired)
    if expected is not None:
        assert repaired == data

    if expected is None:
        return
    # Byte-level fallbacks agree with the native str paths on valid text
    native = (
        turbotext.length(data),
        turbotext.substr(data, 2, 5),
        turbotext.substr(data, -4),
        turbotext.find(data, b"a"),
    )
    with mock.patch.object(flags, "NATIVE_MULTIBYTE", False):
        fallback = (
            turbotext.length(data),
            turbotext.substr(data, 2, 5),
            turbotext.substr(data, -4),
            turbotext.find(data, b"a"),
        )
    assert native == fallback, f"native {native!r} != fallback {fallback!r}"


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer."""
    if seed is not None:
        random.seed(seed)

    failures = []
    hangs = []
    successes = 0

    print(f"Fuzzing turbotext with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        data = generate_fuzzed_bytes()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            check_input(data)
            elapsed = time.perf_counter() - start

            # Check for hangs (>5 seconds)
            if elapsed > 5.0:
                hangs.append({"test_num": i, "data": data, "time": elapsed})
                if verbose:
                    print(f"  HANG: Test {i} took {elapsed:.2f}s")
            else:
                successes += 1

        except Exception as e:
            failures.append({
                "test_num": i,
                "data": data,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  FAIL: Test {i}: {e}")

    elapsed_total = time.time() - start_time

    print(f"\n{'='*60}")
    print("FUZZING RESULTS: turbotext")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Failures:       {len(failures)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Total time:     {elapsed_total:.2f}s")

    if failures:
        print(f"\n{'='*60}")
        print("FAILURE DETAILS:")
        print(f"{'='*60}")
        for failure in failures[:10]:
            print(f"\nTest #{failure['test_num']}:")
            print(f"  Input: {failure['data'][:200]!r}")
            print(f"  Error: {failure['error']}")
        if len(failures) > 10:
            print(f"\n... and {len(failures) - 10} more failures")

    if save_failures and (failures or hangs):
        filename = f"fuzz_failures_{int(time.time())}.txt"
        with open(filename, "w") as f:
            f.write(f"Seed: {seed}\n\n")
            for failure in failures:
                f.write(f"=== FAIL #{failure['test_num']} ===\n")
                f.write(f"Input: {failure['data']!r}\n")
                f.write(f"Traceback:\n{failure['traceback']}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"Input: {hang['data']!r}\n\n")
        print(f"\nFailures saved to {filename}")

    return not failures and not hangs


def main():
    parser = argparse.ArgumentParser(description="Fuzz turbotext with malformed UTF-8")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed inputs (no checking)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(repr(generate_fuzzed_bytes()))
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
