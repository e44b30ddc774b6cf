# gui.py
# Tkinter window for the Budget Ledger

import os
import tkinter as tk
from tkinter import ttk, filedialog, messagebox, simpledialog

import db_utils
import csv_importer
import report_exporter
from ledger import INCOME, EXPENSE, ErrorKind
from utils import format_money

# --- Main Application Window Class ---
class BudgetLedgerGUI:
    def __init__(self, root, ledger, db_file=db_utils.DB_FILE, export_file=report_exporter.EXPORT_FILE):
        self.root = root
        self.root.title("Personal Budget Tracker")
        self.root.geometry("800x600")

        self.ledger = ledger
        self.db_file = db_file
        self.export_file = export_file
        self.budget_var = tk.StringVar()
        self.income_amount_var = tk.StringVar(); self.expense_amount_var = tk.StringVar()
        self.new_income_cat_var = tk.StringVar(); self.new_expense_cat_var = tk.StringVar()
        self.style = ttk.Style()

        self._setup_styles()
        self._create_main_widgets()
        self.refresh_categories()
        self.update_budget_label()
        self.root.protocol("WM_DELETE_WINDOW", self.exit_app)

    def _setup_styles(self):
        available_themes = self.style.theme_names()
        if "vista" in available_themes: self.style.theme_use("vista")
        elif "clam" in available_themes: self.style.theme_use("clam")
        elif "aqua" in available_themes: self.style.theme_use("aqua")
        else: self.style.theme_use(available_themes[0])

    def _create_main_widgets(self):
        self.main_frame = ttk.Frame(self.root, padding="10")
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(self.main_frame, textvariable=self.budget_var, font=('Arial', 12, 'bold')).pack(pady=(0, 10))

        entry_frame = ttk.LabelFrame(self.main_frame, text="Transactions", padding="10")
        entry_frame.pack(fill=tk.X, pady=5)
        ttk.Label(entry_frame, text="Income: $").grid(row=0, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(entry_frame, textvariable=self.income_amount_var, width=12).grid(row=0, column=1, padx=5, pady=3)
        ttk.Label(entry_frame, text="Category:").grid(row=0, column=2, sticky=tk.W, padx=5, pady=3)
        self.income_category_box = ttk.Combobox(entry_frame, state="readonly", width=20)
        self.income_category_box.grid(row=0, column=3, padx=5, pady=3)
        ttk.Button(entry_frame, text="Add Income", command=self.add_income).grid(row=0, column=4, padx=5, pady=3, sticky="ew")

        ttk.Label(entry_frame, text="Expense: $").grid(row=1, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(entry_frame, textvariable=self.expense_amount_var, width=12).grid(row=1, column=1, padx=5, pady=3)
        ttk.Label(entry_frame, text="Category:").grid(row=1, column=2, sticky=tk.W, padx=5, pady=3)
        self.expense_category_box = ttk.Combobox(entry_frame, state="readonly", width=20)
        self.expense_category_box.grid(row=1, column=3, padx=5, pady=3)
        ttk.Button(entry_frame, text="Add Expense", command=self.add_expense).grid(row=1, column=4, padx=5, pady=3, sticky="ew")

        cat_frame = ttk.LabelFrame(self.main_frame, text="Categories", padding="10")
        cat_frame.pack(fill=tk.X, pady=5)
        ttk.Label(cat_frame, text="New Income Category:").grid(row=0, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(cat_frame, textvariable=self.new_income_cat_var, width=20).grid(row=0, column=1, padx=5, pady=3)
        ttk.Button(cat_frame, text="Add Income Category", command=self.add_income_category).grid(row=0, column=2, padx=5, pady=3, sticky="ew")
        ttk.Label(cat_frame, text="New Expense Category:").grid(row=1, column=0, sticky=tk.W, padx=5, pady=3)
        ttk.Entry(cat_frame, textvariable=self.new_expense_cat_var, width=20).grid(row=1, column=1, padx=5, pady=3)
        ttk.Button(cat_frame, text="Add Expense Category", command=self.add_expense_category).grid(row=1, column=2, padx=5, pady=3, sticky="ew")

        table_frame = ttk.Frame(self.main_frame)
        table_frame.pack(fill=tk.BOTH, expand=True, pady=5)
        cols = ('type', 'category', 'amount')
        self.tree = ttk.Treeview(table_frame, columns=cols, show='headings', height=10)
        self.tree.heading('type', text='Type'); self.tree.column('type', width=100, anchor=tk.CENTER)
        self.tree.heading('category', text='Category'); self.tree.column('category', width=250)
        self.tree.heading('amount', text='Amount'); self.tree.column('amount', width=120, anchor=tk.E)
        self.tree.grid(row=0, column=0, sticky='nsew')
        sb = ttk.Scrollbar(table_frame, orient=tk.VERTICAL, command=self.tree.yview); sb.grid(row=0, column=1, sticky='ns')
        self.tree.configure(yscrollcommand=sb.set)
        table_frame.grid_rowconfigure(0, weight=1); table_frame.grid_columnconfigure(0, weight=1)

        self.action_frame = ttk.LabelFrame(self.main_frame, text="Actions", padding="10")
        self.action_frame.pack(fill=tk.X, pady=5)
        self.action_frame.columnconfigure((0, 1, 2, 3, 4, 5), weight=1)
        ttk.Button(self.action_frame, text="View Summary", command=self.show_summary).grid(row=0, column=0, padx=5, pady=5, sticky="ew")
        ttk.Button(self.action_frame, text="Export Data", command=self.export_data).grid(row=0, column=1, padx=5, pady=5, sticky="ew")
        ttk.Button(self.action_frame, text="Import CSV", command=self.import_csv_action).grid(row=0, column=2, padx=5, pady=5, sticky="ew")
        ttk.Button(self.action_frame, text="Export CSV", command=self.export_csv_action).grid(row=0, column=3, padx=5, pady=5, sticky="ew")
        ttk.Button(self.action_frame, text="Save", command=self.save_data).grid(row=0, column=4, padx=5, pady=5, sticky="ew")
        ttk.Button(self.action_frame, text="Exit", command=self.exit_app).grid(row=0, column=5, padx=5, pady=5, sticky="ew")

        self.status_bar = ttk.Label(self.root, text=" Ready", relief=tk.SUNKEN, anchor=tk.W)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def set_status(self, message): self.status_bar.config(text=f" {message}"); self.root.update_idletasks()

    def update_budget_label(self):
        self.budget_var.set(f"Current Budget: {format_money(self.ledger.budget)}")

    def refresh_categories(self):
        """ Reloads both comboboxes, keeping the current selection when it still exists. """
        for box, kind in ((self.income_category_box, INCOME), (self.expense_category_box, EXPENSE)):
            names = list(self.ledger.categories(kind)); current = box.get()
            box['values'] = names
            if current in names: box.set(current)
            elif names: box.set(names[0])

    def _append_last_row(self):
        kind, category, amount = self.ledger.display_log[-1]
        self.tree.insert('', tk.END, values=(kind, category, format_money(amount)))

    # --- Transactions ---
    def _handle_transaction(self, kind, box, amount_var):
        category = box.get()
        if not category: messagebox.showwarning("Select", "Please select a category."); return
        result = self.ledger.record_transaction(kind, category, amount_var.get())
        if not result:
            messagebox.showerror("Error", result.message); self.set_status(result.message); return
        self._append_last_row(); self.update_budget_label(); amount_var.set("")
        self.set_status(result.message)

    def add_income(self): self._handle_transaction(INCOME, self.income_category_box, self.income_amount_var)

    def add_expense(self): self._handle_transaction(EXPENSE, self.expense_category_box, self.expense_amount_var)

    # --- Categories ---
    def add_income_category(self):
        result = self.ledger.add_category(INCOME, self.new_income_cat_var.get())
        self._after_category_added(result, self.new_income_cat_var)

    def add_expense_category(self):
        name = self.new_expense_cat_var.get().strip()
        limit_str = None
        if name and name not in self.ledger.expense_categories:
            limit_str = simpledialog.askstring("Spending Limit", "Set spending limit for this category:", parent=self.root)
        result = self.ledger.add_category(EXPENSE, name, limit_str)
        self._after_category_added(result, self.new_expense_cat_var)

    def _after_category_added(self, result, name_var):
        if not result:
            messagebox.showerror("Error", result.message); return
        if result.error == ErrorKind.INVALID_LIMIT:
            messagebox.showwarning("Invalid Limit", result.message)
        name_var.set(""); self.refresh_categories(); self.set_status(result.message)

    # --- Reports ---
    def show_summary(self):
        messagebox.showinfo("Summary", report_exporter.format_summary(self.ledger))

    def export_data(self):
        result = report_exporter.export_report(self.ledger, self.export_file)
        if result: messagebox.showinfo("Export", result.message)
        else: messagebox.showerror("Error", result.message)
        self.set_status(result.message)

    def export_csv_action(self):
        filetypes = (('CSV', '*.csv'), ('All', '*.*'))
        fp = filedialog.asksaveasfilename(title='Export CSV', defaultextension='.csv', filetypes=filetypes, initialfile=report_exporter.CSV_EXPORT_FILE)
        if not fp: self.set_status("Export cancelled."); return
        result = report_exporter.export_csv(self.ledger, fp)
        if result: messagebox.showinfo("Export", result.message)
        else: messagebox.showerror("Error", result.message)
        self.set_status(result.message)

    def import_csv_action(self):
        self.set_status("Select CSV..."); filetypes = (('CSV', '*.csv'), ('All', '*.*'))
        fp = filedialog.askopenfilename(title='Select CSV', filetypes=filetypes)
        if not fp: self.set_status("Import cancelled."); return
        self.set_status(f"Importing {os.path.basename(fp)}...")
        start = len(self.ledger.display_log)
        imported, skipped = csv_importer.import_csv(self.ledger, fp)
        for kind, category, amount in self.ledger.display_log[start:]:
            self.tree.insert('', tk.END, values=(kind, category, format_money(amount)))
        self.refresh_categories(); self.update_budget_label()
        messagebox.showinfo("Import", f"Import done.\nImported: {imported}\nSkipped: {skipped}")
        self.set_status("Import finished.")

    # --- Persistence ---
    def save_data(self):
        result = db_utils.save_ledger(self.ledger, self.db_file)
        if not result: messagebox.showerror("Error", result.message)
        self.set_status(result.message)
        return result

    def exit_app(self):
        print("Closing...")
        self.save_data()
        self.root.destroy()

def main():
    ledger = db_utils.load_ledger(db_utils.DB_FILE)
    root = tk.Tk()
    BudgetLedgerGUI(root, ledger)
    root.mainloop()

# --- Run ---
if __name__ == "__main__":
    main()
