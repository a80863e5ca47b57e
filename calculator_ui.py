"""
Interfaz gráfica de la calculadora.

Usa tkinter. Cada evento (botón o tecla) se traduce en una operación
del motor mediante KeyDispatcher y, a continuación, se repintan la
fórmula y el resultado. Todo ocurre en el hilo de la interfaz: el motor
no bloquea ni hace E/S.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine
from input_dispatcher import KeyDispatcher, button_action_for_key


logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Widget: campo de resultado con animación de cambio
# ═════════════════════════════════════════════════════════════════

class ResultDisplay:
    """Label de solo lectura que destella al mostrar un resultado nuevo."""

    FLASH_STEPS = 8         # pasos de la animación
    FLASH_INTERVAL = 40     # ms entre pasos
    VISIBLE_CHARS = 17      # caracteres visibles antes de reducir la fuente
    MIN_FONT_SIZE = 12

    def __init__(self, parent, font: tkfont.Font, fg: str, flash_fg: str, **kw):
        self._var = tk.StringVar(value="0")
        self._font = font
        self._base_size = font.cget("size")
        self._fg = fg
        self._flash_fg = flash_fg
        self._label = tk.Label(parent, textvariable=self._var, font=font,
                               fg=fg, anchor="e", **kw)
        self._anim_id = None

    @property
    def widget(self):
        return self._label

    # ── Texto ────────────────────────────────────────────────────

    def set_text(self, text: str):
        self._var.set(text)
        self._fit_font(len(text))

    def get_text(self) -> str:
        return self._var.get()

    def _fit_font(self, length: int):
        size = self._base_size
        if length > self.VISIBLE_CHARS:
            size = max(self.MIN_FONT_SIZE,
                       self._base_size * self.VISIBLE_CHARS // length)
        self._font.configure(size=size)

    # ── Animación ────────────────────────────────────────────────

    def flash(self):
        if self._anim_id:
            self._label.after_cancel(self._anim_id)
            self._anim_id = None
        self._flash_step(self.FLASH_STEPS)

    def _flash_step(self, remaining: int):
        if remaining <= 0:
            self._label.config(fg=self._fg)
            self._anim_id = None
            return
        color = self._flash_fg if remaining % 2 == 0 else self._fg
        self._label.config(fg=color)
        self._anim_id = self._label.after(
            self.FLASH_INTERVAL,
            lambda: self._flash_step(remaining - 1),
        )


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

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
        "pressed":    "#7F849C",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
        "flash_fg":   "#F9E2AF",
    }

    PRESS_HIGHLIGHT_MS = 140

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "func", "special", "equals"

    KEYPAD = [
        [("AC", "clear-all", "special"), ("CE", "clear-entry", "special"),
         ("±", "toggle-sign", "func"), ("%", "percent", "func")],

        [("7", "digit:7", "num"), ("8", "digit:8", "num"),
         ("9", "digit:9", "num"), ("÷", "divide", "op")],

        [("4", "digit:4", "num"), ("5", "digit:5", "num"),
         ("6", "digit:6", "num"), ("×", "multiply", "op")],

        [("1", "digit:1", "num"), ("2", "digit:2", "num"),
         ("3", "digit:3", "num"), ("−", "subtract", "op")],

        [("0", "digit:0", "num"), (".", "decimal", "num"),
         ("=", "equals", "equals"), ("+", "add", "op")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.dispatcher = KeyDispatcher(self.engine)
        self._buttons: dict[str, tuple[tk.Button, str]] = {}

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._render()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=28, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Fórmula en curso (solo lectura)
        self.formula_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.formula_var,
            font=self._f_expr, bg=self.C["display_bg"],
            fg=self.C["expr_fg"], anchor="e",
        ).pack(fill="x", pady=(4, 0))

        # Fila del resultado + botón copiar
        row = tk.Frame(frame, bg=self.C["display_bg"])
        row.pack(fill="x", pady=(2, 4))

        tk.Button(
            row, text="Copiar", font=self._f_small,
            bg=self.C["func"], fg=self.C["func_fg"],
            activebackground=self.C["special"], relief="flat",
            cursor="hand2", command=self._copy_result, padx=8,
        ).pack(side="right", padx=(6, 0))

        self.result_display = ResultDisplay(
            row,
            font=self._f_result,
            fg=self.C["result_fg"],
            flash_fg=self.C["flash_fg"],
            bg=self.C["display_bg"],
        )
        self.result_display.widget.pack(side="right", fill="x", expand=True)

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["pressed"],
                    relief="flat",
                    command=lambda a=action: self._on_action(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                self._buttons[action] = (btn, kind)
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
        char = event.char
        key = char if char and char.isprintable() else event.keysym
        if not key:
            return None

        button_action = button_action_for_key(key)
        if not self.dispatcher.handle_key(key):
            return None

        if button_action is not None:
            self._highlight(button_action)
        self._render()
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_action(self, action: str):
        self.dispatcher.dispatch_action(action)
        self._render()

    def _render(self):
        self.formula_var.set(self.engine.formula_text)
        self.result_display.set_text(self.engine.display_text)
        if self.engine.updated:
            self.result_display.flash()

    def _highlight(self, action: str):
        if action not in self._buttons:
            logger.debug("Sin botón para la acción %s", action)
            return
        btn, kind = self._buttons[action]
        btn.config(bg=self.C["pressed"])
        btn.after(self.PRESS_HIGHLIGHT_MS,
                  lambda: btn.config(bg=self.C[kind]))

    # ── Copiar resultado ─────────────────────────────────────────

    def _copy_result(self):
        text = self.result_display.get_text()
        self.root.clipboard_clear()
        self.root.clipboard_append(text)
