"""Desktop window showing continuous and discrete probability distributions."""

from __future__ import annotations

import argparse
import enum
from typing import Any, Optional, Sequence, Union

from matplotlib.figure import Figure

from .cont_distr import ContDistr
from .cont_panel import ContPanel
from .disc_distr import DiscDistr
from .disc_panel import DiscPanel

TITLE = "Probability Visualizer"


class PanelKind(enum.Enum):
    """Which family of distributions is on screen."""

    CONT = "continuous"
    DISC = "discrete"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ProbabilityApp:
    """Holds both panels and draws the active one.

    With ``root`` set to a Tk window the full interface is built; with ``None``
    only the figure and the summary rows are kept up to date.
    """

    def __init__(self, root: Any = None) -> None:
        self.root = root
        self.cont_panel = ContPanel()
        self.disc_panel = DiscPanel()
        self.open_panel = PanelKind.CONT
        self.summary_rows: list[tuple[str, str]] = []
        self.figure = Figure(figsize=(6.0, 3.0))
        self.axes = self.figure.add_subplot()
        self._canvas: Any = None
        self._tree: Any = None
        self._combo: Any = None
        self._distr_var: Any = None
        self._panel_var: Any = None
        self._param_frame: Any = None
        if root is not None:
            self._build_widgets(root)
        self.refresh()

    @property
    def panel(self) -> Union[ContPanel, DiscPanel]:
        return self.cont_panel if self.open_panel is PanelKind.CONT else self.disc_panel

    def switch_panel(self, kind: PanelKind) -> None:
        """Show the continuous or the discrete panel."""
        self.open_panel = PanelKind(kind)
        if self._panel_var is not None:
            self._panel_var.set(self.open_panel.value)
        self._sync_controls()
        self.refresh()

    def refresh(self) -> None:
        """Recompute statistics and redraw the plot for the active panel."""
        summary = self.panel.summary()
        self.summary_rows = summary.rows() if summary is not None else []
        self._draw()
        if self._tree is not None:
            self._tree.delete(*self._tree.get_children())
            for label, value in self.summary_rows:
                self._tree.insert("", "end", values=(label, value))
        if self._canvas is not None:
            self._canvas.draw_idle()

    def _draw(self) -> None:
        ax = self.axes
        ax.clear()
        if self.open_panel is PanelKind.CONT:
            curves = self.cont_panel.curves()
            if curves is None:
                return
            ax.plot(curves.x, curves.pdf, label="PDF")
            ax.plot(curves.x, curves.cdf, label="CDF")
            ax.set_xlim(*curves.x_bounds)
            ax.set_ylim(*curves.y_bounds)
        else:
            bars = self.disc_panel.bars()
            if bars is None:
                return
            ax.bar(bars.x, bars.pmf, label="PMF")
            ax.bar(bars.x, bars.cdf, label="CDF", alpha=0.5)
            ax.set_xlim(*bars.x_bounds)
            ax.set_ylim(*bars.y_bounds)
        ax.legend()

    def _build_widgets(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import ttk

        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

        root.title(TITLE)
        root.geometry("400x300")
        root.minsize(300, 220)

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Quit", command=root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        root.config(menu=menubar)

        side = ttk.Frame(root, width=250, padding=8)
        side.pack(side=tk.LEFT, fill=tk.Y)

        self._panel_var = tk.StringVar(value=self.open_panel.value)
        selector = ttk.Frame(side)
        selector.pack(anchor=tk.W)
        for kind in PanelKind:
            ttk.Radiobutton(
                selector,
                text=kind.label,
                value=kind.value,
                variable=self._panel_var,
                command=self._on_panel_chosen,
            ).pack(side=tk.LEFT)

        ttk.Label(side, text="Probability distribution", font=("TkDefaultFont", 12, "bold")).pack(
            anchor=tk.W, pady=(4, 10)
        )
        ttk.Label(side, text="Select a distribution").pack(anchor=tk.W)
        self._distr_var = tk.StringVar()
        self._combo = ttk.Combobox(side, textvariable=self._distr_var, state="readonly")
        self._combo.bind("<<ComboboxSelected>>", self._on_distribution_chosen)
        self._combo.pack(anchor=tk.W, fill=tk.X)

        self._param_frame = ttk.Frame(side)
        self._param_frame.pack(anchor=tk.W, fill=tk.X, pady=10)

        ttk.Separator(side).pack(fill=tk.X)
        ttk.Label(side, text="Summary Statistics:", font=("TkDefaultFont", 11, "bold")).pack(
            anchor=tk.W, pady=(10, 10)
        )
        self._tree = ttk.Treeview(side, columns=("stat", "value"), show="headings", height=5)
        self._tree.heading("stat", text="Statistic")
        self._tree.heading("value", text="Value")
        self._tree.column("stat", width=100)
        self._tree.column("value", width=100)
        self._tree.pack(anchor=tk.W)

        central = ttk.Frame(root, padding=8)
        central.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        ttk.Label(central, text="Probability visualizer", font=("TkDefaultFont", 12, "bold")).pack()
        ttk.Separator(central).pack(fill=tk.X)
        self._canvas = FigureCanvasTkAgg(self.figure, master=central)
        self._canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        self._sync_controls()

    def _sync_controls(self) -> None:
        if self._combo is None:
            return
        family = ContDistr if self.open_panel is PanelKind.CONT else DiscDistr
        self._combo.configure(values=[str(kind) for kind in family])
        self._distr_var.set(str(self.panel.kind))
        self._rebuild_params()

    def _rebuild_params(self) -> None:
        import tkinter as tk
        from tkinter import ttk

        for child in self._param_frame.winfo_children():
            child.destroy()
        panel = self.panel
        for index, param in enumerate(panel.defaults):
            ttk.Label(self._param_frame, text=f"{param.name}:").pack(anchor=tk.W)
            var = tk.DoubleVar(value=panel.params[index])

            def update(*_: Any, slot: int = index, variable: Any = var) -> None:
                self._on_param(slot, variable)

            if self.open_panel is PanelKind.DISC and param.name == "p":
                widget: Any = tk.Scale(
                    self._param_frame,
                    variable=var,
                    from_=param.low,
                    to=param.high,
                    resolution=param.speed,
                    orient=tk.HORIZONTAL,
                    command=update,
                )
            else:
                widget = tk.Spinbox(
                    self._param_frame,
                    from_=param.low,
                    to=param.high,
                    increment=param.speed,
                    textvariable=var,
                    command=update,
                )
                var.set(panel.params[index])
                widget.bind("<Return>", update)
                widget.bind("<FocusOut>", update)
            widget.pack(anchor=tk.W, fill=tk.X)
            if param.desc:
                ttk.Label(self._param_frame, text=param.desc, foreground="gray").pack(anchor=tk.W)

    def _on_param(self, index: int, variable: Any) -> None:
        import tkinter as tk

        panel = self.panel
        try:
            value = float(variable.get())
        except (tk.TclError, ValueError):
            value = panel.params[index]
        variable.set(panel.set_param(index, value))
        self.refresh()

    def _on_panel_chosen(self) -> None:
        self.switch_panel(PanelKind(self._panel_var.get()))

    def _on_distribution_chosen(self, _event: Any = None) -> None:
        name = self._distr_var.get()
        if self.open_panel is PanelKind.CONT:
            self.cont_panel.select(ContDistr(name))
        else:
            self.disc_panel.select(DiscDistr(name))
        self._rebuild_params()
        self.refresh()


def _panel_kind(text: str) -> PanelKind:
    try:
        return PanelKind(text.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"choose from {', '.join(kind.value for kind in PanelKind)}"
        ) from None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(prog="probviz", description="Visualize probability distributions.")
    parser.add_argument(
        "--panel",
        type=_panel_kind,
        default=PanelKind.CONT,
        help="panel to open first: continuous or discrete",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run until it is closed."""
    import tkinter as tk

    args = parse_args(argv)
    root = tk.Tk()
    app = ProbabilityApp(root)
    app.switch_panel(args.panel)
    root.mainloop()
    return 0