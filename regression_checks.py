from calculator_engine import CalculatorEngine
import math
import random
import sys


def _split(sequence: str) -> list[str]:
	return sequence.split()


def _walk(sequence: str, *, seed: int | None = None):
	engine = CalculatorEngine(rng=random.Random(seed))
	copied: list[str] = []
	engine.clipboard = copied.append
	states = []

	for label in _split(sequence):
		engine.press(label)
		states.append((label, engine.display))

	return engine, states, copied


def _final(sequence: str) -> str:
	engine, _, _ = _walk(sequence)
	return engine.display


def inspect_sequence(sequence: str, *, seed: int | None = None) -> None:
	"""Imprime la pantalla y el estado interno tras cada pulsación."""
	engine, states, copied = _walk(sequence, seed=seed)

	print("Sequence inspection")
	print(f"labels:         {sequence}")
	print(f"presses:        {len(states)}")
	for i, (label, text) in enumerate(states, start=1):
		print(f"  {i:>2}. {label:<6} -> {text}")

	op = engine.prev_operator.symbol if engine.prev_operator else None
	print(f"prev_number:    {engine.prev_number}")
	print(f"prev_operator:  {op}")
	print(f"last_binary:    {engine.last_binary_number}")
	print(f"flags:          operator_pressed={engine.operator_pressed} "
	      f"result_displayed={engine.result_displayed}")
	if copied:
		print(f"clipboard:      {copied[-1]}")


SCENARIOS = [
	("1 + 1 =", "2"),
	("1 0 0 + 2 0 0 =", "300"),
	("5 – 3 =", "2"),
	("5 – 7 =", "-2"),
	("5 × 2 =", "10"),
	("9 ÷ 3 =", "3"),
	("5 ÷ 0 =", "Error"),
	("0 . 5 × 2 =", "1"),
	("3 x^2", "9"),
	("9 √x", "3"),
	("4 1/x", "0.25"),
	("5 x!", "120"),
	("1 0 0 log10", "2"),
	("2 ln", repr(math.log(2))),
	("2 + 3 × 4 =", "20"),
	("2 + 3 = × 4 =", "20"),
	("3 + 5 = × 2 =", "16"),
	("2 + 3 = = =", "11"),
	("2 + 3 + =", "10"),
	("5 + 3 x^2 =", "14"),
	("5 + 3 x^2 x^2 =", "86"),
	("5 – 3 ± ± =", "2"),
	("5 + 3 x^2 + 1 =", "15"),
	("0 sin", "0"),
	("0 cos", "1"),
	("0 tan", "0"),
	("0 sinh", "0"),
	("0 cosh", "1"),
	("0 tanh", "0"),
	("1 + 1 AC", "0"),
	("5 ÷ 0 = 7", "7"),
	("5 ÷ 0 = 7 + 1 =", "8"),
	("5 ÷ 0 = +", "Error"),
	("1 ÷ 3 =", "0.3333333333333333"),
	("2 √x", "1.4142135623730951"),
	("1 7 1 x!", "Infinity"),
]


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for sequence, expected in SCENARIOS:
		actual = _final(sequence)
		expected_actual.append((sequence, expected, actual))
		checks.append((f"{sequence} -> {expected}", actual == expected))

	_, states_repeat, _ = _walk("2 + 3 = = =")
	checks.append((
		"repeated equals shows 5, 8, 11",
		[text for _, text in states_repeat[-3:]] == ["5", "8", "11"],
	))

	engine_copy, states_copy, copied = _walk("1 2 . 5 Copy")
	checks.append(("Copy keeps display", states_copy[-1][1] == "12.5"))
	checks.append(("Copy hands display to clipboard", copied == ["12.5"]))
	checks.append(("Copy keeps flags", not engine_copy.result_displayed))

	_, states_dots, _ = _walk("1 . 2 . 3 .")
	checks.append((
		"display keeps a single decimal point",
		all(text.count(".") <= 1 for _, text in states_dots),
	))

	for seed in range(20):
		engine_rand, _, _ = _walk("Rand", seed=seed)
		value = float(engine_rand.display)
		checks.append((f"Rand (seed {seed}) in [0, 1)", 0.0 <= value < 1.0))

	engine_ac, _, _ = _walk("2 + 3 = AC AC")
	checks.append((
		"AC resets every optional value",
		engine_ac.display == "0"
		and engine_ac.prev_number is None
		and engine_ac.prev_operator is None
		and engine_ac.last_binary_number is None,
	))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "2 + 3 = = ="
	#   python regression_checks.py --inspect "Rand" --seed 7
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing label sequence after --inspect")

		seed = None
		if "--seed" in sys.argv:
			try:
				seed = int(sys.argv[sys.argv.index("--seed") + 1])
			except (ValueError, IndexError):
				raise SystemExit("Invalid value for --seed")

		inspect_sequence(sequence, seed=seed)
	else:
		run_regressions()
