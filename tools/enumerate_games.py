import sys
import time
sys.path.append('.')
import game  # type: ignore

# Known totals for standard tic-tac-toe when play stops at the first win.
EXPECTED = {"games": 255168, "x_wins": 131184, "o_wins": 77904, "draws": 46080}


def main():
    t0 = time.time()
    counts = game.count_games().as_dict()
    took = int((time.time() - t0) * 1000)
    for key, value in counts.items():
        mark = "ok" if EXPECTED[key] == value else f"MISMATCH (expected {EXPECTED[key]})"
        print(f"{key:>7}: {value:>7} {mark}")
    print(f"Enumerated in {took}ms")
    if counts != EXPECTED:
        sys.exit(1)


if __name__ == '__main__':
    main()
