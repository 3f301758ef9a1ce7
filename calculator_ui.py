"""
Interfaz gráfica de la calculadora.

Usa tkinter. La ventana solo traduce botones y teclas a símbolos de
entrada y pinta los textos que expone el motor; todo el estado vive en
CalculatorEngine.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from token_classifier import Mode, token_for_key


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "func":       "#45475A",
        "func_fg":    "#CDD6F4",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "toggle_on":  "#A6E3A1",
        "toggle_off": "#585B70",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
        "error_fg":   "#F38BA8",
    }

    # ── Botones científicos: (texto, símbolo) ────────────────────

    SCIENCE_BUTTONS = [
        ("sin", "sin"), ("cos", "cos"), ("tan", "tan"),
        ("ln", "ln"), ("log", "log"), ("√", "sqrt"),
        ("x²", "x²"), ("π", "π"), ("e", "e"),
    ]

    # ── Definiciones del teclado principal ────────────────────────
    #  Cada fila es una lista de (texto, símbolo, tipo_color)

    KEYPAD = [
        [("AC", "AC", "special"), ("±", "±", "special"),
         ("%", "%", "special"), ("÷", "/", "op")],

        [("7", "7", "num"), ("8", "8", "num"),
         ("9", "9", "num"), ("×", "*", "op")],

        [("4", "4", "num"), ("5", "5", "num"),
         ("6", "6", "num"), ("−", "-", "op")],

        [("1", "1", "num"), ("2", "2", "num"),
         ("3", "3", "num"), ("+", "+", "op")],

        [("0", "0", "num"), (".", ".", "num"),
         ("⌫", "⌫", "special"), ("=", "=", "equals")],
    ]

    SCIENCE_COLUMNS = 3

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine(scheduler=root)
        self.engine.on_change = self._refresh

        self._init_fonts()
        self._create_display()
        self._create_toggle_bar()
        self._science_frame = None
        self._create_keypad()
        self._bind_keyboard()

        if self.engine.mode is Mode.SCIENTIFIC:
            self._create_science_panel()
        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=26, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_func   = tkfont.Font(family="Segoe UI", size=12)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.history_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.history_var, font=self._f_expr,
            bg=self.C["display_bg"], fg=self.C["expr_fg"], anchor="e",
        ).pack(fill="x", pady=(4, 0))

        self.display_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.display_var, font=self._f_result,
            bg=self.C["display_bg"], fg=self.C["result_fg"], anchor="e",
        ).pack(fill="x", pady=(2, 0))

        self.error_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.error_var, font=self._f_small,
            bg=self.C["display_bg"], fg=self.C["error_fg"], anchor="e",
        ).pack(fill="x", pady=(0, 4))

    # ── Barra de modo (Básica · Científica) ──────────────────────

    def _create_toggle_bar(self):
        self._toggle_frame = tk.Frame(self.root, bg=self.C["bg"])
        self._toggle_frame.pack(fill="x", padx=6, pady=(2, 2))

        self.mode_btn = tk.Button(
            self._toggle_frame, font=self._f_small, width=10,
            bg=self.C["toggle_off"], fg=self.C["special_fg"],
            activebackground=self.C["toggle_off"], relief="flat",
            command=self._toggle_mode,
        )
        self.mode_btn.pack(side="left")
        self._paint_mode_button()

    def _paint_mode_button(self):
        # El botón ofrece el modo contrario al actual
        if self.engine.mode is Mode.SCIENTIFIC:
            self.mode_btn.config(text="Básica", bg=self.C["toggle_on"],
                                 fg=self.C["bg"])
        else:
            self.mode_btn.config(text="Científica", bg=self.C["toggle_off"],
                                 fg=self.C["special_fg"])

    # ── Panel de funciones científicas ───────────────────────────

    def _create_science_panel(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=2, after=self._toggle_frame)
        for col in range(self.SCIENCE_COLUMNS):
            frame.columnconfigure(col, weight=1, uniform="sci")

        for idx, (text, symbol) in enumerate(self.SCIENCE_BUTTONS):
            row, col = divmod(idx, self.SCIENCE_COLUMNS)
            tk.Button(
                frame, text=text, font=self._f_func,
                bg=self.C["func"], fg=self.C["func_fg"],
                activebackground=self.C["special"], relief="flat",
                command=lambda s=symbol: self._press(s),
            ).grid(row=row, column=col, sticky="nsew", padx=2, pady=2,
                   ipady=6)

        self._science_frame = frame

    def _destroy_science_panel(self):
        if self._science_frame is not None:
            self._science_frame.destroy()
            self._science_frame = None

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, symbol, kind) in enumerate(row_def):
                tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda s=symbol: self._press(s),
                ).grid(row=r, column=col_pos, columnspan=spans[idx],
                       sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        spans[-1] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        symbol = token_for_key(event.char, event.keysym)
        if symbol is not None:
            self._press(symbol)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _press(self, symbol: str):
        self.engine.submit(symbol)

    def _toggle_mode(self):
        mode = self.engine.toggle_mode()
        if mode is Mode.SCIENTIFIC:
            self._create_science_panel()
        else:
            self._destroy_science_panel()
        self._paint_mode_button()

    def _refresh(self):
        self.display_var.set(self.engine.display_text)
        self.history_var.set(self.engine.history_text)
        self.error_var.set(self.engine.error_text or "")
