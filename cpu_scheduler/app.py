"""
CPU Scheduling Simulator GUI
============================

customtkinter front-end for the scheduling engine in
``cpu_scheduler.algorithms``. The window lets you:

- Add processes (arrival time, burst time, priority) or load an example
  scenario
- Select FCFS, SJF, Priority or Round Robin (with its time quantum)
- Inspect the resulting Gantt chart and per-process metrics
- Compare all algorithms on the same process set and export the metrics

No scheduling logic lives here; the GUI only parses input, calls the
engine and renders what it returns.
"""

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Dict, List, Optional, Sequence

import customtkinter as ctk

from .algorithms import DEFAULT_QUANTUM, Algorithm, run_algorithm, run_all
from .export import write_stats_csv
from .inputs import parse_process_fields, parse_quantum
from .metrics import compute_aggregates
from .models import Process, ProcessStats, ScheduleEntry
from .scenarios import SCENARIOS

logger = logging.getLogger(__name__)

WINDOW_TITLE = "CPU Scheduling Simulator"
WINDOW_GEOMETRY = "1100x700"
APPEARANCE_MODE = "dark"
COLOR_THEME = "dark-blue"

NO_SCENARIO = "None"

EVEN_ROW_COLOR = "#020617"
ODD_ROW_COLOR = "#111827"
IDLE_COLOR = "#4B5563"

# Color palette for processes (bright accents on dark background).
PROCESS_COLORS = [
    "#22C55E",  # emerald
    "#3B82F6",  # blue
    "#EAB308",  # amber
    "#EC4899",  # pink
    "#F97316",  # orange
    "#8B5CF6",  # violet
    "#06B6D4",  # cyan
    "#FACC15",  # yellow
    "#EF4444",  # red
    "#14B8A6",  # teal
]

EMPTY_AGGREGATES_TEXT = (
    "CPU Utilization: N/A  |  Throughput: N/A  |  Idle Time: N/A  |  "
    "Min Waiting: N/A  |  Max Waiting: N/A"
)

HELP_TEXT = [
    (
        "FCFS (First-Come, First-Served)",
        "Non-preemptive. Processes are served strictly in order of arrival.\n"
        "Simple to implement but can suffer from the 'convoy effect' when a "
        "long job blocks many short ones.",
    ),
    (
        "SJF (Shortest Job First, non-preemptive)",
        "Among the ready processes, always run the one with the smallest "
        "burst time. Minimizes average waiting time in theory, but can "
        "cause starvation of long jobs.",
    ),
    (
        "Priority Scheduling (non-preemptive)",
        "Each process has a priority (lower number = higher priority).\n"
        "The highest-priority ready job runs to completion. Can starve "
        "low-priority jobs if high-priority jobs keep arriving.",
    ),
    (
        "Round Robin (RR)",
        "Preemptive, time-sliced scheduling. Each process receives up to "
        "a fixed time quantum, then moves to the back of the ready queue, "
        "behind any process that arrived during its slice.",
    ),
    (
        "Ties",
        "Equal keys are broken by earlier arrival, then by lower PID.",
    ),
    (
        "Metrics",
        "Turnaround Time T = Completion - Arrival.\n"
        "Waiting Time   W = Turnaround - Burst.\n"
        "CPU Utilization = BusyTime / TotalTime.\n"
        "Throughput      = NumberOfProcesses / TotalTime.",
    ),
]


# ---------------------------------------------------------------------------
# Simple tooltip helper for Tk / customtkinter widgets
# ---------------------------------------------------------------------------


class _ToolTip:
    """Minimal tooltip implementation for Tk / customtkinter widgets."""

    def __init__(self, widget: tk.Widget, text: str) -> None:
        self.widget = widget
        self.text = text
        self._tip_window: Optional[tk.Toplevel] = None
        widget.bind("<Enter>", self._on_enter)
        widget.bind("<Leave>", self._on_leave)

    def _on_enter(self, _event: tk.Event) -> None:
        if self._tip_window is not None:
            return
        x = self.widget.winfo_rootx() + 20
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 5
        self._tip_window = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")
        tk.Label(
            tw,
            text=self.text,
            justify="left",
            background="#111827",
            foreground="#F9FAFB",
            relief="solid",
            borderwidth=1,
            font=("Segoe UI", 9),
            padx=4,
            pady=2,
        ).pack(ipadx=1)

    def _on_leave(self, _event: tk.Event) -> None:
        if self._tip_window is not None:
            self._tip_window.destroy()
            self._tip_window = None


def _add_tooltip(widget: tk.Widget, text: str) -> None:
    _ToolTip(widget, text)


def _make_table(
    parent: ctk.CTkFrame, headings: Sequence, height: int, width: int = 90
) -> ttk.Treeview:
    """Striped, centered Treeview with a vertical scrollbar packed into ``parent``."""
    tree = ttk.Treeview(
        parent, columns=[col for col, _ in headings], show="headings", height=height
    )
    for col, label in headings:
        tree.heading(col, text=label)
        tree.column(col, anchor="center", width=width, stretch=True)
    tree.tag_configure("evenrow", background=EVEN_ROW_COLOR)
    tree.tag_configure("oddrow", background=ODD_ROW_COLOR)
    tree.pack(side="left", fill="both", expand=True, padx=(4, 0), pady=4)

    scrollbar = ttk.Scrollbar(parent, orient="vertical", command=tree.yview)
    tree.configure(yscroll=scrollbar.set)
    scrollbar.pack(side="right", fill="y", padx=(0, 4), pady=4)
    return tree


def _row_tag(index: int) -> str:
    return "evenrow" if index % 2 == 0 else "oddrow"


# ---------------------------------------------------------------------------
# GUI Application
# ---------------------------------------------------------------------------


class CPUSchedulerApp:
    """
    customtkinter-based GUI for exploring CPU scheduling algorithms.

    High-level structure:
        - Top section: process input (arrival, burst, priority) + list of processes.
        - Middle section: algorithm selection + (for RR) quantum selection.
        - Bottom section: Gantt chart, metrics table and comparison table.
    """

    def __init__(self, root: Optional[ctk.CTk] = None) -> None:
        ctk.set_appearance_mode(APPEARANCE_MODE)
        ctk.set_default_color_theme(COLOR_THEME)

        if root is None:
            root = ctk.CTk()
        self.root = root
        self.root.title(WINDOW_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self._algorithm_for_label: Dict[str, Algorithm] = {
            algorithm.label: algorithm for algorithm in Algorithm
        }
        self._algorithm_label_var = ctk.StringVar(value=Algorithm.FCFS.label)
        self._appearance_var = ctk.StringVar(value="Dark")

        # Processes in input order; pids are their 1-based positions.
        self._rows: List[tuple] = []

        self._current_schedule: List[ScheduleEntry] = []
        self._current_stats: List[ProcessStats] = []
        self._selected_pid: Optional[int] = None
        self._comparison_algorithm_for_item: Dict[str, Algorithm] = {}
        self._help_window: Optional[ctk.CTkToplevel] = None

        self._configure_treeview_style()
        self._build_ui()

    @property
    def selected_algorithm(self) -> Algorithm:
        return self._algorithm_for_label.get(self._algorithm_label_var.get(), Algorithm.FCFS)

    def _configure_treeview_style(self) -> None:
        """Apply a dark theme to ttk Treeview widgets so they match customtkinter."""
        style = ttk.Style(self.root)
        try:
            style.theme_use("clam")
        except tk.TclError:
            logger.debug("ttk theme 'clam' unavailable; keeping default")

        style.configure(
            "Treeview",
            background=EVEN_ROW_COLOR,
            foreground="#E5E7EB",
            fieldbackground=EVEN_ROW_COLOR,
            bordercolor="#1F2937",
            borderwidth=1,
            rowheight=22,
        )
        style.map(
            "Treeview",
            background=[("selected", "#1D4ED8")],
            foreground=[("selected", "#F9FAFB")],
        )
        style.configure(
            "Treeview.Heading",
            background="#0F172A",
            foreground="#E5E7EB",
            font=("Segoe UI Semibold", 9),
        )

    def _on_theme_changed(self, mode: str) -> None:
        ctk.set_appearance_mode(mode.lower())
        self._configure_treeview_style()

    def _show_help_window(self) -> None:
        """Open a small help window explaining the algorithms and metrics."""
        if self._help_window is not None:
            try:
                self._help_window.lift()
                return
            except tk.TclError:
                self._help_window = None

        help_win = self._help_window = ctk.CTkToplevel(self.root)
        help_win.title("CPU Scheduling – Theory Overview")
        help_win.geometry("700x500")

        container = ctk.CTkScrollableFrame(help_win, corner_radius=0)
        container.pack(fill="both", expand=True, padx=12, pady=12)

        ctk.CTkLabel(
            container,
            text="CPU Scheduling Algorithms – Overview",
            font=("Segoe UI Semibold", 18),
        ).pack(anchor="w", pady=(0, 8))

        for heading, body in HELP_TEXT:
            ctk.CTkLabel(container, text=heading, font=("Segoe UI Semibold", 14)).pack(
                anchor="w", pady=(10, 2)
            )
            ctk.CTkLabel(container, text=body, font=("Segoe UI", 11), justify="left").pack(
                anchor="w"
            )

        ctk.CTkButton(container, text="Close", width=100, command=help_win.destroy).pack(
            anchor="e", pady=(16, 0)
        )

    # ------------------------------------------------------------------#
    # UI construction                                                   #
    # ------------------------------------------------------------------#

    def _build_ui(self) -> None:
        # Scrollable so the bottom sections stay reachable on small screens.
        main_frame = ctk.CTkScrollableFrame(self.root, corner_radius=0, fg_color="transparent")
        main_frame.pack(fill="both", expand=True, padx=16, pady=16)

        header_frame = ctk.CTkFrame(main_frame, fg_color="transparent")
        header_frame.pack(fill="x", pady=(0, 10))

        title_left = ctk.CTkFrame(header_frame, fg_color="transparent")
        title_left.pack(side="left", fill="x", expand=True)
        ctk.CTkLabel(title_left, text=WINDOW_TITLE, font=("Segoe UI Semibold", 22)).pack(
            anchor="w"
        )
        ctk.CTkLabel(
            title_left,
            text=" • ".join(algorithm.value for algorithm in Algorithm),
            font=("Segoe UI", 12),
        ).pack(anchor="w")

        title_right = ctk.CTkFrame(header_frame, fg_color="transparent")
        title_right.pack(side="right")
        ctk.CTkSegmentedButton(
            title_right,
            values=["Dark", "Light"],
            variable=self._appearance_var,
            width=140,
            command=self._on_theme_changed,
        ).pack(side="right", padx=(0, 8))
        ctk.CTkButton(
            title_right, text="Help / Theory", width=110, command=self._show_help_window
        ).pack(side="right", padx=(0, 8))

        self._build_process_input_section(main_frame)
        self._build_algorithm_section(main_frame)
        self._build_output_section(main_frame)

    def _build_process_input_section(self, parent: ctk.CTkFrame) -> None:
        frame = ctk.CTkFrame(parent, corner_radius=12)
        frame.pack(fill="x", pady=(10, 10))

        ctk.CTkLabel(frame, text="Process Input", font=("Segoe UI Semibold", 13)).grid(
            row=0, column=0, columnspan=2, padx=12, pady=(10, 6), sticky="w"
        )

        ctk.CTkLabel(frame, text="Arrival Time").grid(row=1, column=0, padx=12, pady=4, sticky="w")
        self.arrival_entry = ctk.CTkEntry(frame, width=80)
        self.arrival_entry.grid(row=1, column=1, padx=6, pady=4, sticky="w")

        ctk.CTkLabel(frame, text="Burst Time").grid(row=1, column=2, padx=12, pady=4, sticky="w")
        self.burst_entry = ctk.CTkEntry(frame, width=80)
        self.burst_entry.grid(row=1, column=3, padx=6, pady=4, sticky="w")

        priority_label = ctk.CTkLabel(frame, text="Priority\n(lower = higher)")
        priority_label.grid(row=1, column=4, padx=12, pady=4, sticky="w")
        self.priority_entry = ctk.CTkEntry(frame, width=80)
        self.priority_entry.grid(row=1, column=5, padx=6, pady=4, sticky="w")
        _add_tooltip(
            priority_label,
            "Lower numeric value = higher priority.\n"
            "Example: priority 1 runs before priority 3.",
        )

        ctk.CTkButton(frame, text="Add Process", command=self.add_process, width=110).grid(
            row=1, column=6, padx=10, pady=4
        )
        ctk.CTkButton(
            frame,
            text="Remove Selected",
            command=self.remove_selected_process,
            width=140,
            fg_color="#1F2937",
            hover_color="#111827",
        ).grid(row=1, column=7, padx=10, pady=4)

        table_container = ctk.CTkFrame(frame, fg_color="transparent")
        table_container.grid(row=2, column=0, columnspan=8, sticky="nsew", padx=8, pady=(8, 10))
        self.process_tree = _make_table(
            table_container,
            [("pid", "PID"), ("arrival", "Arrival"), ("burst", "Burst"), ("priority", "Priority")],
            height=8,
        )
        self.process_tree.bind("<<TreeviewSelect>>", self._on_process_tree_select)

        for col_index in range(8):
            frame.columnconfigure(col_index, weight=1)
        frame.rowconfigure(2, weight=1)

    def _build_algorithm_section(self, parent: ctk.CTkFrame) -> None:
        frame = ctk.CTkFrame(parent, corner_radius=12)
        frame.pack(fill="x", pady=(0, 10))

        ctk.CTkLabel(frame, text="Scheduling Algorithm", font=("Segoe UI Semibold", 13)).grid(
            row=0, column=0, padx=12, pady=10, sticky="w"
        )
        self.algorithm_combobox = ctk.CTkComboBox(
            frame,
            values=list(self._algorithm_for_label),
            variable=self._algorithm_label_var,
            width=320,
            state="readonly",
            command=self._on_algorithm_combobox_change,
        )
        self.algorithm_combobox.grid(row=0, column=1, padx=8, pady=10, sticky="w")

        quantum_label = ctk.CTkLabel(frame, text="Time Quantum")
        quantum_label.grid(row=0, column=2, padx=(20, 4), pady=10, sticky="e")
        self.quantum_entry = ctk.CTkEntry(frame, width=80)
        self.quantum_entry.insert(0, str(DEFAULT_QUANTUM))
        self.quantum_entry.grid(row=0, column=3, padx=(0, 10), pady=10, sticky="w")
        _add_tooltip(
            quantum_label,
            "Round Robin only:\nEach process gets up to this many time units per turn.",
        )
        self._on_algorithm_combobox_change(self._algorithm_label_var.get())

        ctk.CTkButton(frame, text="Run Simulation", command=self.run_simulation, width=140).grid(
            row=0, column=4, padx=(10, 5), pady=10
        )
        ctk.CTkButton(
            frame, text="Compare Algorithms", command=self.run_comparison, width=170
        ).grid(row=0, column=5, padx=(5, 5), pady=10)
        ctk.CTkButton(
            frame,
            text="Clear All",
            command=self.clear_all,
            width=120,
            fg_color="#1F2937",
            hover_color="#111827",
        ).grid(row=0, column=6, padx=(5, 10), pady=10)

        ctk.CTkLabel(frame, text="Example Scenario", font=("Segoe UI", 11)).grid(
            row=1, column=0, padx=12, pady=(0, 6), sticky="w"
        )
        self.scenario_var = ctk.StringVar(value=NO_SCENARIO)
        self.scenario_combobox = ctk.CTkComboBox(
            frame,
            values=[NO_SCENARIO] + list(SCENARIOS),
            variable=self.scenario_var,
            width=320,
            state="readonly",
            command=self._on_scenario_selected,
        )
        self.scenario_combobox.grid(row=1, column=1, columnspan=3, padx=8, pady=(0, 6), sticky="w")
        _add_tooltip(
            self.scenario_combobox,
            "Load a predefined set of processes that illustrates\n"
            "a particular scheduling behavior (e.g., starvation).",
        )

        averages_frame = ctk.CTkFrame(frame, fg_color="transparent")
        averages_frame.grid(row=2, column=4, columnspan=3, padx=(10, 10), pady=(0, 10), sticky="ne")
        self.avg_waiting_label = ctk.CTkLabel(
            averages_frame, text="Average Waiting Time: N/A", font=("Segoe UI Semibold", 16)
        )
        self.avg_waiting_label.pack(anchor="e")
        self.avg_turnaround_label = ctk.CTkLabel(
            averages_frame, text="Average Turnaround Time: N/A", font=("Segoe UI Semibold", 16)
        )
        self.avg_turnaround_label.pack(anchor="e")
        self.extra_metrics_label = ctk.CTkLabel(
            averages_frame, text=EMPTY_AGGREGATES_TEXT, font=("Segoe UI", 11)
        )
        self.extra_metrics_label.pack(anchor="e", pady=(4, 0))

        frame.columnconfigure(1, weight=1)

    def _on_algorithm_combobox_change(self, selected_label: str) -> None:
        """Enable the time quantum field only for Round Robin."""
        algorithm = self._algorithm_for_label.get(selected_label, Algorithm.FCFS)
        self.quantum_entry.configure(state="normal" if algorithm.needs_quantum else "disabled")

    def _build_output_section(self, parent: ctk.CTkFrame) -> None:
        frame = ctk.CTkFrame(parent, corner_radius=12)
        frame.pack(fill="both", expand=True)

        gantt_frame = ctk.CTkFrame(frame, corner_radius=12)
        gantt_frame.pack(fill="x", padx=10, pady=(10, 0))
        ctk.CTkLabel(gantt_frame, text="Gantt Chart", font=("Segoe UI Semibold", 13)).pack(
            anchor="w", padx=12, pady=(10, 4)
        )
        self.gantt_canvas = tk.Canvas(
            gantt_frame, height=120, bg=EVEN_ROW_COLOR, highlightthickness=0
        )
        self.gantt_canvas.pack(fill="x", padx=12, pady=(0, 12))

        metrics_frame = ctk.CTkFrame(frame, corner_radius=12)
        metrics_frame.pack(fill="both", expand=True, padx=10, pady=(10, 0))
        ctk.CTkLabel(metrics_frame, text="Process Metrics", font=("Segoe UI Semibold", 13)).pack(
            anchor="w", padx=12, pady=(10, 4)
        )
        table_container = ctk.CTkFrame(metrics_frame, fg_color="transparent")
        table_container.pack(fill="both", expand=True, padx=8, pady=(0, 8))
        self.results_tree = _make_table(
            table_container,
            [
                ("pid", "PID"),
                ("arrival", "Arrival"),
                ("burst", "Burst"),
                ("priority", "Priority"),
                ("completion", "Completion"),
                ("turnaround", "Turnaround"),
                ("waiting", "Waiting"),
            ],
            height=12,
        )

        export_frame = ctk.CTkFrame(metrics_frame, fg_color="transparent")
        export_frame.pack(fill="x", padx=12, pady=(0, 10))
        ctk.CTkButton(
            export_frame, text="Export Metrics (CSV)", width=170, command=self._export_metrics_csv
        ).pack(side="left", padx=(0, 8))

        comparison_frame = ctk.CTkFrame(frame, corner_radius=12)
        comparison_frame.pack(fill="both", expand=True, padx=10, pady=(10, 10))
        ctk.CTkLabel(
            comparison_frame, text="Algorithm Comparison", font=("Segoe UI Semibold", 13)
        ).pack(anchor="w", padx=12, pady=(10, 4))
        comparison_container = ctk.CTkFrame(comparison_frame, fg_color="transparent")
        comparison_container.pack(fill="both", expand=True, padx=8, pady=(0, 8))
        self.comparison_tree = _make_table(
            comparison_container,
            [
                ("algorithm", "Algorithm"),
                ("avg_waiting", "Avg Waiting"),
                ("avg_turnaround", "Avg Turnaround"),
                ("cpu_util", "CPU Util (%)"),
                ("throughput", "Throughput"),
            ],
            height=5,
            width=120,
        )
        self.comparison_tree.bind("<<TreeviewSelect>>", self._on_comparison_select)

    # ------------------------------------------------------------------#
    # Process list operations                                           #
    # ------------------------------------------------------------------#

    def add_process(self) -> None:
        """Add a new process using the values from the entry fields."""
        try:
            row = parse_process_fields(
                self.arrival_entry.get(), self.burst_entry.get(), self.priority_entry.get()
            )
        except ValueError as exc:
            messagebox.showerror("Invalid input", str(exc))
            return

        self._rows.append(row)
        self._refresh_process_tree()

        for entry in (self.arrival_entry, self.burst_entry, self.priority_entry):
            entry.delete(0, tk.END)

    def remove_selected_process(self) -> None:
        """Remove the selected rows; remaining processes are renumbered P1..PN."""
        selected = {self.process_tree.index(item) for item in self.process_tree.selection()}
        if not selected:
            return
        self._rows = [row for index, row in enumerate(self._rows) if index not in selected]
        self._refresh_process_tree()

    def clear_all(self) -> None:
        """Clear all processes, results, comparison data, and the Gantt chart."""
        self._rows = []
        self._refresh_process_tree()
        self._clear_results()

    def _clear_results(self) -> None:
        for tree in (self.results_tree, self.comparison_tree):
            tree.delete(*tree.get_children())
        self._comparison_algorithm_for_item.clear()
        self.gantt_canvas.delete("all")
        self.avg_waiting_label.configure(text="Average Waiting Time: N/A")
        self.avg_turnaround_label.configure(text="Average Turnaround Time: N/A")
        self.extra_metrics_label.configure(text=EMPTY_AGGREGATES_TEXT)
        self._current_schedule = []
        self._current_stats = []
        self._selected_pid = None

    def _refresh_process_tree(self) -> None:
        self.process_tree.delete(*self.process_tree.get_children())
        for index, process in enumerate(self._get_processes()):
            self.process_tree.insert(
                "",
                "end",
                values=(process.label, process.arrival_time, process.burst_time, process.priority),
                tags=(_row_tag(index),),
            )

    def _get_processes(self) -> List[Process]:
        return [
            Process(pid=index, arrival_time=arrival, burst_time=burst, priority=priority)
            for index, (arrival, burst, priority) in enumerate(self._rows, start=1)
        ]

    # ------------------------------------------------------------------#
    # Selection handling + scenarios                                    #
    # ------------------------------------------------------------------#

    def _on_process_tree_select(self, _event: tk.Event) -> None:
        """Highlight the selected process in the metrics table and Gantt chart."""
        selection = self.process_tree.selection()
        self._selected_pid = self.process_tree.index(selection[0]) + 1 if selection else None

        self.results_tree.selection_remove(*self.results_tree.selection())
        if self._selected_pid is not None:
            for item in self.results_tree.get_children():
                if self.results_tree.index(item) + 1 == self._selected_pid:
                    self.results_tree.selection_set(item)
                    self.results_tree.see(item)
                    break

        if self._current_schedule:
            self._draw_gantt_chart(self._current_schedule)

    def _on_scenario_selected(self, selected_label: str) -> None:
        """Replace the current processes with a predefined example scenario."""
        if selected_label not in SCENARIOS:
            return
        self.clear_all()
        self._rows = list(SCENARIOS[selected_label])
        self._refresh_process_tree()
        logger.info("Loaded scenario %r (%d processes)", selected_label, len(self._rows))

    # ------------------------------------------------------------------#
    # Simulation + visualization                                        #
    # ------------------------------------------------------------------#

    def _show_result(self, schedule: List[ScheduleEntry], stats: List[ProcessStats]) -> None:
        aggregates = compute_aggregates(schedule, stats)
        self._current_stats = stats
        self._populate_results_table(
            stats, aggregates["avg_waiting"], aggregates["avg_turnaround"]
        )
        self.extra_metrics_label.configure(
            text=(
                f"CPU Utilization: {aggregates['cpu_utilization'] * 100:.2f}%  |  "
                f"Throughput: {aggregates['throughput']:.3f} proc/unit  |  "
                f"Idle Time: {aggregates['idle_time']}  |  "
                f"Min Waiting: {aggregates['min_waiting']:.2f}  |  "
                f"Max Waiting: {aggregates['max_waiting']:.2f}"
            )
        )
        self._draw_gantt_chart(schedule)

    def _run_and_show(self, algorithm: Algorithm) -> None:
        processes = self._get_processes()
        try:
            quantum = parse_quantum(self.quantum_entry.get()) if algorithm.needs_quantum else None
            schedule, stats = run_algorithm(algorithm, processes, quantum)
        except ValueError as exc:
            messagebox.showerror("Error", str(exc))
            return
        self._show_result(schedule, stats)

    def run_simulation(self) -> None:
        """Run the selected scheduling algorithm and update the GUI."""
        if not self._rows:
            messagebox.showerror(
                "No processes", "Please add at least one process before running the simulation."
            )
            return
        self._run_and_show(self.selected_algorithm)

    def run_comparison(self) -> None:
        """Run all algorithms on the current process set and populate the comparison table."""
        if not self._rows:
            messagebox.showerror(
                "No processes", "Please add at least one process before running the comparison."
            )
            return

        try:
            quantum = parse_quantum(self.quantum_entry.get(), required=False)
            results = run_all(self._get_processes(), quantum)
        except ValueError as exc:
            messagebox.showerror("Error", str(exc))
            return

        self._comparison_algorithm_for_item.clear()
        self.comparison_tree.delete(*self.comparison_tree.get_children())
        for index, (algorithm, (schedule, stats)) in enumerate(results.items()):
            aggregates = compute_aggregates(schedule, stats)
            item_id = self.comparison_tree.insert(
                "",
                "end",
                values=(
                    algorithm.label,
                    f"{aggregates['avg_waiting']:.2f}",
                    f"{aggregates['avg_turnaround']:.2f}",
                    f"{aggregates['cpu_utilization'] * 100:.2f}",
                    f"{aggregates['throughput']:.3f}",
                ),
                tags=(_row_tag(index),),
            )
            self._comparison_algorithm_for_item[item_id] = algorithm

    def _on_comparison_select(self, _event: tk.Event) -> None:
        """Show the full results of the algorithm picked in the comparison table."""
        selection = self.comparison_tree.selection()
        if not selection or not self._rows:
            return
        algorithm = self._comparison_algorithm_for_item.get(selection[0])
        if algorithm is not None:
            self._algorithm_label_var.set(algorithm.label)
            self._on_algorithm_combobox_change(algorithm.label)
            self._run_and_show(algorithm)

    def _populate_results_table(
        self, stats: List[ProcessStats], avg_waiting: float, avg_turnaround: float
    ) -> None:
        self.results_tree.delete(*self.results_tree.get_children())
        for index, row in enumerate(stats):
            self.results_tree.insert(
                "",
                "end",
                values=(
                    row.label,
                    row.arrival_time,
                    row.burst_time,
                    row.priority,
                    row.completion_time,
                    row.turnaround_time,
                    row.waiting_time,
                ),
                tags=(_row_tag(index),),
            )

        self.avg_waiting_label.configure(text=f"Average Waiting Time: {avg_waiting:.2f}")
        self.avg_turnaround_label.configure(text=f"Average Turnaround Time: {avg_turnaround:.2f}")

    def _export_metrics_csv(self) -> None:
        if not self._current_stats:
            messagebox.showinfo("Nothing to export", "Run a simulation first.")
            return
        path = filedialog.asksaveasfilename(
            defaultextension=".csv", filetypes=[("CSV files", "*.csv")]
        )
        if not path:
            return
        try:
            with open(path, "w", newline="", encoding="utf-8") as handle:
                write_stats_csv(self._current_stats, handle)
        except OSError as exc:
            messagebox.showerror("Export failed", str(exc))
            return
        logger.info("Exported metrics to %s", path)

    def _draw_gantt_chart(self, schedule: List[ScheduleEntry]) -> None:
        """
        Draw the Gantt chart on the Canvas.

        Each schedule entry is drawn as a rectangle whose width is
        proportional to its duration. Idle time is shown in gray, and the
        currently selected PID (if any) gets a thicker white border.
        """
        self._current_schedule = list(schedule)
        self.gantt_canvas.delete("all")
        if not schedule:
            return

        total_time = max(entry["end"] for entry in schedule)

        canvas_width = int(self.gantt_canvas.winfo_width())
        if canvas_width <= 1:
            # Canvas not laid out yet.
            canvas_width = 800

        left_margin = right_margin = 20
        bar_top, bar_bottom = 30, 80
        time_scale = max(1, canvas_width - left_margin - right_margin) / float(total_time)

        label_font = ("Segoe UI", 9)
        tick_font = ("Segoe UI", 8)

        for entry in schedule:
            start, end, pid = entry["start"], entry["end"], entry["pid"]
            x1 = left_margin + start * time_scale
            x2 = left_margin + end * time_scale

            if pid is None:
                fill_color, label = IDLE_COLOR, "Idle"
            else:
                fill_color = PROCESS_COLORS[(pid - 1) % len(PROCESS_COLORS)]
                label = f"P{pid}"

            selected = pid is not None and pid == self._selected_pid
            self.gantt_canvas.create_rectangle(
                x1,
                bar_top,
                x2,
                bar_bottom,
                fill=fill_color,
                outline="#F9FAFB" if selected else "#111827",
                width=3 if selected else 1,
            )
            self.gantt_canvas.create_text(
                (x1 + x2) / 2, (bar_top + bar_bottom) / 2, text=label, font=label_font, fill="#F9FAFB"
            )
            self.gantt_canvas.create_line(x1, bar_bottom, x1, bar_bottom + 5, fill=IDLE_COLOR)
            self.gantt_canvas.create_text(
                x1, bar_bottom + 7, text=str(start), anchor="n", font=tick_font, fill="#D1D5DB"
            )

        final_x = left_margin + total_time * time_scale
        self.gantt_canvas.create_line(final_x, bar_bottom, final_x, bar_bottom + 5, fill=IDLE_COLOR)
        self.gantt_canvas.create_text(
            final_x, bar_bottom + 7, text=str(total_time), anchor="n", font=tick_font, fill="#D1D5DB"
        )

    def run(self) -> None:
        """Start the Tkinter main event loop."""
        self.root.mainloop()


def main() -> None:
    """Entry point for the ``cpu-scheduler`` script and ``python -m cpu_scheduler``."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = CPUSchedulerApp()
    app.run()


if __name__ == "__main__":
    main()
