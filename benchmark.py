import time
from notetheory.constants import FLAT_NOTATIONS, ODD_NOTATIONS, SHARP_NOTATIONS
from notetheory.notes import notes_in_key_signature, to_frequency, to_midi

def run_benchmark(repeats=2000):
    names = [f"{n}{o}" for n in SHARP_NOTATIONS + FLAT_NOTATIONS + ODD_NOTATIONS
             for o in range(10)]

    # Benchmark conversions
    start_time = time.perf_counter()
    for _ in range(repeats):
        for name in names:
            to_midi(name)
            to_frequency(name)
    end_time = time.perf_counter()
    print(f"Conversions ({repeats * len(names) * 2} calls): {end_time - start_time:.4f} seconds")

    # Benchmark key signatures
    start_time = time.perf_counter()
    for _ in range(repeats):
        for root in SHARP_NOTATIONS:
            notes_in_key_signature(root, True, 4)
            notes_in_key_signature(root, False)
    end_time = time.perf_counter()
    print(f"Key signatures ({repeats * len(SHARP_NOTATIONS) * 2} calls): {end_time - start_time:.4f} seconds")

if __name__ == '__main__':
    run_benchmark()
