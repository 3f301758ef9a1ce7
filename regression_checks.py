from calculator_engine import CalculatorEngine
from token_classifier import Mode
import sys


class _FakeScheduler:
	"""Sustituto de ``tk.after``: guarda los trabajos hasta ``fire``."""

	def __init__(self):
		self.jobs = {}
		self._next_id = 0

	def after(self, ms, fn=None):
		self._next_id += 1
		job_id = f"after#{self._next_id}"
		self.jobs[job_id] = (ms, fn)
		return job_id

	def after_cancel(self, job_id):
		self.jobs.pop(job_id, None)

	def fire(self):
		jobs, self.jobs = self.jobs, {}
		for _ms, fn in jobs.values():
			if fn:
				fn()


def _walk(sequence: str, *, mode: Mode = Mode.BASIC, scheduler=None):
	engine = CalculatorEngine(mode=mode, scheduler=scheduler)
	states = []

	for symbol in sequence.split():
		engine.submit(symbol)
		states.append((symbol, engine.display_text, engine.history_text, engine.error_text))

	return engine, states


def inspect_states(sequence: str, *, scientific: bool = False) -> None:
	"""Imprime la pantalla, el historial y el error tras cada símbolo."""
	mode = Mode.SCIENTIFIC if scientific else Mode.BASIC
	engine, states = _walk(sequence, mode=mode)

	print("Token inspection")
	print(f"sequence:       {sequence}")
	print(f"mode:           {mode.value}")
	print(f"tokens walked:  {len(states)}")

	for i, (symbol, display, history, error) in enumerate(states, start=1):
		line = f"  {i}. {symbol:<6} display={display!r} history={history!r}"
		if error:
			line += f" error={error!r}"
		print(line)

	print(f"final input:    {engine.current_input}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	engine, _ = _walk("2 + 3 =")
	expected_actual.append(("2 + 3 =", "5", engine.display_text))
	checks.append(("2 + 3 = history", engine.history_text == "2 + 3 = 5"))

	engine, _ = _walk("2 + 3 + 4 =")
	checks.append(("chained operators evaluate left to right", engine.display_text == "9"))

	engine, states = _walk("1 2 + 3 4 +")
	checks.append(("operator after chain shows running total", states[-1][1] == "46"))
	checks.append(("operator history uses pending operand", states[-1][2] == "46 +"))

	engine, _ = _walk("0 . 1 + 0 . 2 =")
	expected_actual.append(("0.1 + 0.2 =", "0.3", engine.display_text))
	checks.append((
		"equals history keeps unrounded result",
		engine.history_text == "0.1 + 0.2 = 0.30000000000000004",
	))

	engine, _ = _walk(". . 5")
	checks.append(("second decimal point ignored", engine.current_input == "0.5"))

	engine, _ = _walk("5 0 %")
	expected_actual.append(("50 %", "0.5", engine.display_text))

	engine, _ = _walk("7 ± ±")
	checks.append(("sign toggle twice is identity", engine.current_input == "7"))

	engine, _ = _walk("8 ⌫")
	checks.append(("backspace on single digit resets to 0", engine.current_input == "0"))

	engine, _ = _walk("1 2 3 4 5 6 7 8 9 0 1 2 3")
	expected_actual.append(("13 digits", "1.234568e+12", engine.display_text))

	engine, _ = _walk("1 2 3 4 5 6 7 8 9 0 1 2")
	checks.append(("12 characters stay verbatim", engine.display_text == "123456789012"))

	scheduler = _FakeScheduler()
	engine, states = _walk("9 / 0 =", scheduler=scheduler)
	checks.append(("division by zero keeps current input", engine.current_input == "0"))
	checks.append(("division by zero keeps pending operand", engine.previous_input == 9))
	checks.append(("division by zero shows error", states[-1][3] is not None))
	checks.append(("division by zero schedules auto-clear", len(scheduler.jobs) == 1))
	scheduler.fire()
	checks.append(("auto-clear removes error", engine.error_text is None))

	engine, states = _walk("8 / 0 + 2 =")
	checks.append(("chain division by zero keeps new operator", states[3][2] == "8 +"))
	expected_actual.append(("8 / 0 + 2 =", "10", engine.display_text))

	engine, _ = _walk("5 ± ⌫ ±")
	checks.append(("backspace never leaves a bare sign", engine.current_input == "0"))

	engine, _ = _walk("9 0 sin", mode=Mode.SCIENTIFIC)
	expected_actual.append(("sin 90°", "1", engine.display_text))

	engine, _ = _walk("9 0 sin")
	checks.append(("scientific tokens ignored in basic mode", engine.display_text == "90"))

	engine, _ = _walk("π", mode=Mode.SCIENTIFIC)
	expected_actual.append(("π", "3.141592653589793", engine.current_input))

	engine, _ = _walk("4 - 6 = AC", mode=Mode.SCIENTIFIC)
	checks.append(("clear keeps mode", engine.mode is Mode.SCIENTIFIC))
	checks.append(("clear resets history text", engine.history_text == ""))

	for label, expected, actual in expected_actual:
		checks.append((label, expected == actual))

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
	#   python regression_checks.py --inspect "2 + 3 ="
	#   python regression_checks.py --inspect "9 0 sin" --scientific
	if "--inspect" in sys.argv:
		try:
			sequence = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing token sequence after --inspect")

		inspect_states(sequence, scientific="--scientific" in sys.argv)
	else:
		run_regressions()
