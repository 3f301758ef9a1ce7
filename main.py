"""Punto de entrada de la calculadora.

Uso:
    python main.py                      # ventana tkinter
    python main.py --stdin              # un símbolo por línea desde stdin
    python main.py --stdin --scientific # idem, con funciones científicas
"""

import logging
import sys

from calculator_engine import CalculatorEngine
from config import LOG_LEVEL, START_MODE
from token_classifier import Mode


def _start_mode(argv) -> Mode:
    if "--scientific" in argv:
        return Mode.SCIENTIFIC
    try:
        return Mode(START_MODE)
    except ValueError:
        logging.getLogger(__name__).warning(
            "CALC_START_MODE desconocido: %r; se usa 'basic'", START_MODE
        )
        return Mode.BASIC


def run_stdin(stream, out, mode: Mode = Mode.BASIC) -> int:
    """Lee símbolos de ``stream`` e imprime pantalla, historial y error.

    Cada línea produce una línea ``pantalla<TAB>historial<TAB>error``.
    La línea ``mode`` alterna entre modo básico y científico.
    """
    engine = CalculatorEngine(mode=mode)
    for line in stream:
        symbol = line.strip()
        if not symbol:
            continue
        if symbol == "mode":
            engine.toggle_mode()
        else:
            engine.submit(symbol)
        out.write(
            f"{engine.display_text}\t{engine.history_text}\t{engine.error_text or ''}\n"
        )
    return 0


def run_window(mode: Mode) -> int:
    import tkinter as tk

    from calculator_ui import CalculatorApp

    root = tk.Tk()
    root.geometry("360x560")
    root.minsize(320, 480)
    CalculatorApp(root, engine=CalculatorEngine(mode=mode, scheduler=root))
    root.mainloop()
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    mode = _start_mode(argv)
    if "--stdin" in argv:
        return run_stdin(sys.stdin, sys.stdout, mode)
    return run_window(mode)


if __name__ == "__main__":
    raise SystemExit(main())
