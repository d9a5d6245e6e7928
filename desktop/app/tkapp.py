"""Tkinter desktop application for the budget tracker."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from datetime import date
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import Callable, Iterable, List, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from budget_core.charts import category_pie, monthly_pie
from budget_core.config import configure_logging, load_settings
from budget_core.exceptions import PersistenceError, ValidationError
from budget_core.models import Record
from budget_core.reports import (
    MONTH_NAMES,
    breakdown_month_choices,
    breakdown_year_choices,
    export_csv,
    format_amount_display,
    monthly_summary,
    year_choices,
)
from budget_core.services import Ledger
from budget_core.storage import JSONStorage
from budget_core.validators import CATEGORIES, RECORD_TYPES, parse_amount, validate_description

logger = logging.getLogger(__name__)

PRIMARY_BG = "#0f172a"
SECONDARY_BG = "#1e293b"
ACCENT_BG = "#1d4ed8"
ACCENT_ACTIVE_BG = "#2563eb"
TEXT_PRIMARY = "#e2e8f0"
TEXT_MUTED = "#94a3b8"


class ChartFrame(ttk.Frame):
    """Holds one embedded matplotlib figure, replaced on every redraw."""

    def __init__(self, master: tk.Misc) -> None:
        super().__init__(master, style="Panel.TFrame")
        self._canvas: Optional[FigureCanvasTkAgg] = None

    def show(self, fig: Figure) -> None:
        if self._canvas is not None:
            self._canvas.get_tk_widget().destroy()
        self._canvas = FigureCanvasTkAgg(fig, master=self)
        self._canvas.draw()
        self._canvas.get_tk_widget().pack(fill="both", expand=True)


class AddTransactionTab(ttk.Frame):
    """Form for entering one transaction at a time."""

    def __init__(self, master: tk.Misc, ledger: Ledger, on_change: Callable[[], None]) -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.ledger = ledger
        self.on_change = on_change

        self.income_var = tk.BooleanVar(value=True)
        self.date_var = tk.StringVar(value=date.today().isoformat())
        self.amount_var = tk.StringVar()
        self.category_var = tk.StringVar(value=CATEGORIES[0])
        self.description_var = tk.StringVar()

        self._build_form()
        self.columnconfigure(0, weight=1)

    def _build_form(self) -> None:
        form = ttk.LabelFrame(self, text="Add Transaction", style="Card.TLabelframe")
        form.grid(row=0, column=0, sticky="ew", padx=4, pady=(0, 12))
        form.columnconfigure(1, weight=1)

        def add_label(text: str, row: int) -> None:
            ttk.Label(form, text=text, style="FormLabel.TLabel").grid(
                column=0, row=row, sticky="w", padx=8, pady=6
            )

        add_label("Transaction Type", 0)
        type_frame = ttk.Frame(form, style="Panel.TFrame")
        type_frame.grid(column=1, row=0, sticky="w", padx=8, pady=6)
        ttk.Radiobutton(type_frame, text="Income", variable=self.income_var, value=True).grid(
            column=0, row=0, padx=(0, 12)
        )
        ttk.Radiobutton(type_frame, text="Expense", variable=self.income_var, value=False).grid(
            column=1, row=0
        )

        add_label("Date (YYYY-MM-DD)", 1)
        ttk.Entry(form, textvariable=self.date_var, style="App.TEntry").grid(
            column=1, row=1, sticky="ew", padx=8, pady=6
        )

        add_label("Amount", 2)
        amount_entry = ttk.Entry(form, textvariable=self.amount_var, style="App.TEntry")
        amount_entry.grid(column=1, row=2, sticky="ew", padx=8, pady=6)
        amount_entry.bind("<FocusOut>", self._handle_amount_focus_out)

        add_label("Category", 3)
        ttk.Combobox(
            form,
            textvariable=self.category_var,
            values=list(CATEGORIES),
            state="readonly",
            style="App.TCombobox",
        ).grid(column=1, row=3, sticky="ew", padx=8, pady=6)

        add_label("Description", 4)
        ttk.Entry(form, textvariable=self.description_var, style="App.TEntry").grid(
            column=1, row=4, sticky="ew", padx=8, pady=6
        )

        ttk.Button(
            form,
            text="Add Transaction",
            command=self.submit,
            style="Primary.TButton",
        ).grid(column=0, row=5, columnspan=2, pady=(12, 4))

    def submit(self) -> None:
        try:
            amount = parse_amount(self.amount_var.get(), "Amount")
            record = Record(
                date=self.date_var.get(),
                description=validate_description(self.description_var.get()),
                amount=amount,
                category=self.category_var.get(),
                is_income=self.income_var.get(),
            )
        except ValidationError as exc:
            messagebox.showerror("Input Error", f"Error: {exc}", parent=self)
            return

        try:
            self.ledger.append(record)
        except PersistenceError as exc:
            messagebox.showerror("Error", f"Error saving transactions: {exc}", parent=self)
        else:
            messagebox.showinfo("Success", "Transaction added successfully!", parent=self)

        self.reset_form()
        self.on_change()

    def reset_form(self) -> None:
        self.amount_var.set("")
        self.description_var.set("")
        self.date_var.set(date.today().isoformat())

    def _handle_amount_focus_out(self, _event: object) -> None:
        try:
            self.amount_var.set(format_amount_display(parse_amount(self.amount_var.get())))
        except ValidationError as exc:
            # Left as typed; submit reports the error.
            logger.debug("Amount not reformatted: %s", exc)


class TransactionsTab(ttk.Frame):
    """Table of all transactions with a type filter, column sort and CSV export."""

    COLUMNS = ("date", "description", "amount", "category", "type")

    def __init__(self, master: tk.Misc, ledger: Ledger) -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.ledger = ledger
        self.filter_var = tk.StringVar(value=RECORD_TYPES[0])
        self._sort_column: Optional[str] = None
        self._sort_reverse = False

        self._build_filter_bar()
        self._build_table()
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

    def _build_filter_bar(self) -> None:
        bar = ttk.Frame(self, style="Panel.TFrame")
        bar.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        ttk.Label(bar, text="Filter:", style="FormLabel.TLabel").grid(row=0, column=0, padx=4)
        ttk.Combobox(
            bar,
            textvariable=self.filter_var,
            values=list(RECORD_TYPES),
            state="readonly",
            width=10,
            style="App.TCombobox",
        ).grid(row=0, column=1, padx=4)
        ttk.Button(bar, text="Apply", command=self.populate, style="Secondary.TButton").grid(
            row=0, column=2, padx=4
        )
        ttk.Button(bar, text="Clear", command=self.clear_filter, style="Secondary.TButton").grid(
            row=0, column=3, padx=4
        )
        ttk.Button(bar, text="Export to CSV", command=self.export, style="Primary.TButton").grid(
            row=0, column=4, padx=(16, 4)
        )

    def _build_table(self) -> None:
        table_frame = ttk.Frame(self, style="Panel.TFrame")
        table_frame.grid(row=1, column=0, sticky="nsew")
        table_frame.columnconfigure(0, weight=1)
        table_frame.rowconfigure(0, weight=1)

        self.tree = ttk.Treeview(
            table_frame,
            columns=self.COLUMNS,
            show="headings",
            height=12,
            style="App.Treeview",
        )
        for key in self.COLUMNS:
            width = 260 if key == "description" else 120
            self.tree.heading(key, text=key.capitalize(), anchor="w", command=lambda k=key: self.sort_by(k))
            self.tree.column(key, width=width, anchor="w")

        vsb = ttk.Scrollbar(table_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscroll=vsb.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

    def _sorted(self, records: List[Record]) -> List[Record]:
        if self._sort_column is None:
            return records
        keys = {
            "date": lambda r: r.date,
            "description": lambda r: r.description.lower(),
            "amount": lambda r: r.amount,
            "category": lambda r: r.category.lower(),
            "type": lambda r: r.kind,
        }
        return sorted(records, key=keys[self._sort_column], reverse=self._sort_reverse)

    def sort_by(self, column: str) -> None:
        if self._sort_column == column:
            self._sort_reverse = not self._sort_reverse
        else:
            self._sort_column, self._sort_reverse = column, False
        self.populate()

    def clear_filter(self) -> None:
        self.filter_var.set(RECORD_TYPES[0])
        self._sort_column, self._sort_reverse = None, False
        self.populate()

    def populate(self) -> None:
        self.tree.delete(*self.tree.get_children())
        for record in self._sorted(self.ledger.filter(self.filter_var.get())):
            values = (
                record.date.isoformat(),
                record.description,
                format_amount_display(record.amount),
                record.category,
                record.kind,
            )
            self.tree.insert("", "end", values=values)

    def export(self) -> None:
        path = filedialog.asksaveasfilename(
            title="Export Transactions",
            initialfile="transactions.csv",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
            parent=self,
        )
        if not path:
            return
        try:
            export_csv(self.ledger.all(), Path(path))
        except PersistenceError as exc:
            messagebox.showerror("Export Error", f"Error exporting data: {exc}", parent=self)
            return
        messagebox.showinfo(
            "Export Complete", f"Data exported successfully to {Path(path).name}", parent=self
        )


class MonthlySummaryTab(ttk.Frame):
    """Income/expense totals for a selected month as text and a pie chart."""

    def __init__(self, master: tk.Misc, ledger: Ledger) -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.ledger = ledger
        today = date.today()
        self.month_var = tk.StringVar(value=MONTH_NAMES[today.month - 1])
        self.year_var = tk.StringVar(value=str(today.year))

        bar = ttk.Frame(self, style="Panel.TFrame")
        bar.grid(row=0, column=0, columnspan=2, sticky="w", pady=(0, 8))
        ttk.Label(bar, text="Select Month:", style="FormLabel.TLabel").grid(row=0, column=0, padx=4)
        ttk.Combobox(
            bar, textvariable=self.month_var, values=list(MONTH_NAMES), state="readonly", width=12
        ).grid(row=0, column=1, padx=4)
        ttk.Combobox(
            bar,
            textvariable=self.year_var,
            values=[str(year) for year in year_choices(today)],
            state="readonly",
            width=6,
        ).grid(row=0, column=2, padx=4)
        ttk.Button(bar, text="Calculate", command=self.calculate, style="Primary.TButton").grid(
            row=0, column=3, padx=4
        )

        self.results = tk.Text(
            self, width=36, height=10, font=("Courier", 11), bg=SECONDARY_BG, fg=TEXT_PRIMARY
        )
        self.results.grid(row=1, column=0, sticky="nsew", padx=(0, 8))
        self.chart = ChartFrame(self)
        self.chart.grid(row=1, column=1, sticky="nsew")
        self.columnconfigure((0, 1), weight=1)
        self.rowconfigure(1, weight=1)

    def calculate(self) -> None:
        month = MONTH_NAMES.index(self.month_var.get()) + 1
        summary = monthly_summary(self.ledger, month, int(self.year_var.get()))
        self.results.configure(state="normal")
        self.results.delete("1.0", "end")
        self.results.insert("1.0", summary.to_text())
        self.results.configure(state="disabled")
        self.chart.show(monthly_pie(summary))


class CategoryBreakdownTab(ttk.Frame):
    """Expense totals per category as a pie chart."""

    def __init__(self, master: tk.Misc, ledger: Ledger) -> None:
        super().__init__(master, padding=16, style="Panel.TFrame")
        self.ledger = ledger
        months = breakdown_month_choices()
        years = breakdown_year_choices()
        self.month_var = tk.StringVar(value=months[0])
        self.year_var = tk.StringVar(value=years[0])

        bar = ttk.Frame(self, style="Panel.TFrame")
        bar.grid(row=0, column=0, sticky="w", pady=(0, 8))
        ttk.Label(bar, text="Select Month:", style="FormLabel.TLabel").grid(row=0, column=0, padx=4)
        ttk.Combobox(bar, textvariable=self.month_var, values=months, state="readonly", width=12).grid(
            row=0, column=1, padx=4
        )
        ttk.Combobox(bar, textvariable=self.year_var, values=years, state="readonly", width=10).grid(
            row=0, column=2, padx=4
        )
        ttk.Button(bar, text="Calculate", command=self.calculate, style="Primary.TButton").grid(
            row=0, column=3, padx=4
        )

        self.chart = ChartFrame(self)
        self.chart.grid(row=1, column=0, sticky="nsew")
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

    def calculate(self) -> None:
        # Index 0 is "All Months", so the combobox index is the month number.
        month = breakdown_month_choices().index(self.month_var.get())
        breakdown = self.ledger.category_breakdown(month, self.year_var.get())
        title = f"Expenses by Category: {self.month_var.get()}, {self.year_var.get()}"
        self.chart.show(category_pie(breakdown, title))


class BudgetTrackerApp(tk.Tk):
    """Main application window."""

    def __init__(self, ledger: Ledger) -> None:
        super().__init__()
        self.title("Personal Budget Tracker")
        self.geometry("960x640")
        self.minsize(820, 560)
        self.configure(bg=PRIMARY_BG)

        self._configure_styles()
        self.ledger = ledger

        self._build_layout()
        self.refresh_all()

        if ledger.load_error is not None:
            messagebox.showerror(
                "Error", f"Error loading transactions: {ledger.load_error}", parent=self
            )

    def _configure_styles(self) -> None:
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        style.configure("TFrame", background=PRIMARY_BG)
        style.configure("TLabel", background=PRIMARY_BG, foreground=TEXT_PRIMARY)
        style.configure("TRadiobutton", background=SECONDARY_BG, foreground=TEXT_PRIMARY)

        style.configure("Panel.TFrame", background=SECONDARY_BG, relief="flat")
        style.configure("Card.TLabelframe", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Card.TLabelframe.Label", background=SECONDARY_BG, foreground=TEXT_PRIMARY)
        style.configure("Header.TFrame", background=PRIMARY_BG)

        style.configure("FormLabel.TLabel", background=SECONDARY_BG, foreground=TEXT_MUTED, font=("Segoe UI", 9))
        style.configure("Header.TLabel", background=PRIMARY_BG, foreground=TEXT_PRIMARY, font=("Segoe UI", 20, "bold"))

        style.configure(
            "App.TEntry",
            fieldbackground=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            insertcolor=TEXT_PRIMARY,
            bordercolor=ACCENT_BG,
        )
        style.configure(
            "App.TCombobox",
            fieldbackground=SECONDARY_BG,
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            arrowcolor=TEXT_PRIMARY,
        )
        style.map("App.TCombobox", fieldbackground=[("readonly", SECONDARY_BG)])

        style.configure(
            "Primary.TButton",
            background=ACCENT_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=ACCENT_BG,
            padding=(18, 6),
        )
        style.map("Primary.TButton", background=[("active", ACCENT_ACTIVE_BG)])
        style.configure(
            "Secondary.TButton",
            background=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            bordercolor=SECONDARY_BG,
            padding=(14, 6),
        )
        style.map("Secondary.TButton", background=[("active", ACCENT_BG)])

        style.configure(
            "App.Treeview",
            background=SECONDARY_BG,
            fieldbackground=SECONDARY_BG,
            foreground=TEXT_PRIMARY,
            rowheight=28,
        )
        style.configure("App.Treeview.Heading", background=SECONDARY_BG, foreground=TEXT_MUTED, relief="flat")
        style.map("App.Treeview", background=[("selected", ACCENT_BG)])

        style.configure("App.TNotebook", background=PRIMARY_BG, borderwidth=0)
        style.configure("App.TNotebook.Tab", background=SECONDARY_BG, foreground=TEXT_MUTED, padding=(16, 10))
        style.map(
            "App.TNotebook.Tab",
            background=[("selected", ACCENT_BG)],
            foreground=[("selected", TEXT_PRIMARY)],
        )

    def _build_layout(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        header = ttk.Frame(self, padding=20, style="Header.TFrame")
        header.grid(row=0, column=0, sticky="ew")
        ttk.Label(header, text="Personal Budget Tracker", style="Header.TLabel").grid(
            row=0, column=0, sticky="w"
        )

        notebook = ttk.Notebook(self, style="App.TNotebook")
        notebook.grid(row=1, column=0, sticky="nsew")

        self.add_tab = AddTransactionTab(notebook, self.ledger, self.refresh_all)
        self.transactions_tab = TransactionsTab(notebook, self.ledger)
        self.summary_tab = MonthlySummaryTab(notebook, self.ledger)
        self.breakdown_tab = CategoryBreakdownTab(notebook, self.ledger)

        notebook.add(self.add_tab, text="Add Transaction", padding=4)
        notebook.add(self.transactions_tab, text="View Transactions", padding=4)
        notebook.add(self.summary_tab, text="Monthly Summary", padding=4)
        notebook.add(self.breakdown_tab, text="Category Breakdown", padding=4)

    def refresh_all(self) -> None:
        self.transactions_tab.populate()
        self.summary_tab.calculate()
        self.breakdown_tab.calculate()


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Tkinter desktop app for the budget tracker")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory containing transactions.json (default: $BUDGET_TRACKER_DATA_DIR or ./data)",
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    args = parser.parse_args(list(argv) if argv is not None else None)

    settings = load_settings(args.data_dir, args.log_level)
    configure_logging(settings.log_level)
    ledger = Ledger(JSONStorage(settings.data_dir), settings.resource)
    logger.info("Starting desktop app with %d transactions from %s", len(ledger), ledger.path)

    app = BudgetTrackerApp(ledger)
    app.mainloop()


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
