from calculator_engine import CalculatorEngine
from input_dispatcher import KeyDispatcher
import sys


def _tokens(sequence: str) -> list[str]:
	"""Separa "200 + 10 % =" en teclas individuales."""
	keys = []
	for token in sequence.split():
		if token in ("Enter", "Escape", "Backspace"):
			keys.append(token)
		else:
			keys.extend(token)
	return keys


def _walk(sequence: str):
	engine = CalculatorEngine()
	dispatcher = KeyDispatcher(engine)
	states = []

	for key in _tokens(sequence):
		dispatcher.handle_key(key)
		states.append((key, engine.display_text, engine.formula_text))

	return engine, states


def _results(sequence: str) -> list[str]:
	"""Texto mostrado tras cada pulsación de '='."""
	_, states = _walk(sequence)
	return [display for key, display, _ in states if key in ("=", "Enter")]


def inspect_key_states(sequence: str) -> None:
	"""Imprime el estado del motor después de cada tecla."""
	engine, states = _walk(sequence)

	print("Key inspection")
	print(f"keys:           {sequence}")
	print(f"total keys:     {len(states)}")
	for i, (key, display, formula) in enumerate(states, start=1):
		print(f"  {i}. {key!r:12} display={display!r:24} formula={formula!r}")

	print(f"final entry:    {engine.entry}")
	print(f"pending:        {engine.pending_operator}")
	print(f"awaiting next:  {engine.awaiting_fresh_entry}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	engine, _ = _walk("5 + 3 =")
	expected_actual.append(("5 + 3 =", "8", engine.display_text))
	checks.append(("simple addition formula", engine.formula_text == "5 + 3"))

	engine, _ = _walk("5 / 0 =")
	expected_actual.append(("5 / 0 =", "NaN", engine.display_text))
	checks.append(("division by zero clears pending operator", engine.pending_operator is None))
	checks.append(("division by zero shows error formula", engine.formula_text == "Error"))

	engine, _ = _walk("5 / 0 = 7")
	checks.append(("digit after error starts fresh entry", engine.entry == "7"))

	expected_actual.append((
		"5 + 3 = = =",
		"8 11 14",
		" ".join(_results("5 + 3 = = =")),
	))
	expected_actual.append((
		"10 - 4 = = (repeat keeps subtracting)",
		"6 2",
		" ".join(_results("10 - 4 = =")),
	))

	engine, _ = _walk("200 + 10 %")
	expected_actual.append(("200 + 10 %", "20", engine.entry))
	engine, _ = _walk("200 + 10 % =")
	expected_actual.append(("200 + 10 % =", "220", engine.display_text))

	engine, _ = _walk("50 %")
	expected_actual.append(("50 % without pending operator", "0.5", engine.entry))

	engine, _ = _walk("5 + 3 * 2 =")
	expected_actual.append(("5 + 3 * 2 =", "16", engine.display_text))
	checks.append(("chained formula shows last step", engine.formula_text == "8 × 2"))

	engine, _ = _walk("5 + 3 *")
	checks.append(("implicit compute before new operator", engine.formula_text == "8 ×"))

	engine, _ = _walk("7 * =")
	expected_actual.append(("7 * = (operand reused)", "49", engine.display_text))

	engine, _ = _walk(".1 + .2 =")
	expected_actual.append(("0.1 + 0.2 rounds float noise", "0.3", engine.display_text))

	engine, _ = _walk("1 / 3 =")
	expected_actual.append(("1 / 3 keeps 12 decimals", "0.333333333333", engine.display_text))

	engine, _ = _walk("123456789 / 7 =")
	expected_actual.append(("results keep 15 significant digits", "17636684.1428571", engine.entry))

	engine, _ = _walk("1234567 . 25")
	expected_actual.append(("grouping keeps typed fraction", "1,234,567.25", engine.display_text))

	engine, _ = _walk("1234567890123456789")
	checks.append(("entry capped at 15 digits", engine.entry == "123456789012345"))

	engine, _ = _walk("1 . 2 . 3")
	checks.append(("single decimal point", engine.entry == "1.23"))

	engine, _ = _walk("123 Backspace Backspace Backspace Backspace")
	checks.append(("backspace collapses to zero", engine.entry == "0"))

	engine, _ = _walk("5 + 3 = Escape")
	checks.append(("escape resets everything", (
		engine.entry == "0"
		and engine.formula_text == ""
		and engine.last_operator is None
	)))

	engine = CalculatorEngine()
	engine.toggle_sign()
	checks.append(("toggle sign on zero is no-op", engine.entry == "0"))
	engine.input_digit("5")
	engine.toggle_sign()
	checks.append(("toggle sign negates", engine.entry == "-5"))
	engine.toggle_sign()
	checks.append(("toggle sign twice restores", engine.entry == "5"))

	for label, expected, actual in expected_actual:
		checks.append((f"{label} gives {expected}", expected == actual))

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
	#   python regression_checks.py --inspect "5 + 3 = ="
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		inspect_key_states(sequence)
	else:
		run_regressions()
