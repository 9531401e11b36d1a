# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import random

from cg2d.hull import ConvexHull2D

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def generate_random_points(n: int, size: int = 20):
    """
    Генерує n випадкових цілих точок у квадраті [-size, size]^2.
    """
    return [(random.randint(-size, size), random.randint(-size, size)) for _ in range(n)]


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x,y) як int.
    """
    points = []
    lines = text.splitlines()
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        line = line.replace(",", " ")
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(int, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати цілі числа '{line}'")
        points.append((x, y))
    if not points:
        raise ValueError("Потрібна щонайменше 1 точка.")
    return points


class HullApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Graham scan")
        self.geometry("700x650")

        # сюди покладемо Figure/Canvas
        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Режим вводу ---
        mode_frame = ttk.LabelFrame(main, text="Режим вводу точок")
        mode_frame.pack(fill="x", pady=5)

        self.input_mode = tk.StringVar(value="random")

        ttk.Radiobutton(
            mode_frame,
            text="Випадкові цілі точки",
            variable=self.input_mode,
            value="random",
            command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)

        ttk.Radiobutton(
            mode_frame,
            text="Ручне введення точок",
            variable=self.input_mode,
            value="manual",
            command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        input_frame = ttk.LabelFrame(main, text="Параметри (для випадкових точок)")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість точок:").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.n_entry = ttk.Entry(input_frame, width=10)
        self.n_entry.insert(0, "30")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        manual_frame = ttk.LabelFrame(main, text="Ручне введення точок (одна точка - один рядок)")
        manual_frame.pack(fill="both", expand=True, pady=5)

        self.points_text = tk.Text(manual_frame, height=6, wrap="none")
        self.points_text.pack(fill="both", expand=True, padx=5, pady=5)
        self.points_text.insert(
            "1.0",
            "# Приклад:\n"
            "0 3\n1 1\n2 2\n4 4\n0 0\n"
            "1 2\n4 1\n3 3\n0 2\n4 2\n"
        )

        run_btn = ttk.Button(main, text="Побудувати оболонку", command=self.run_hull)
        run_btn.pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.points_var = tk.StringVar(value="—")
        self.vertices_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Точок:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.points_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Вершин оболонки:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.vertices_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        plot_frame = ttk.LabelFrame(main, text="Візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        if self.input_mode.get() == "random":
            self.n_entry.configure(state="normal")
        else:  # manual
            self.n_entry.configure(state="disabled")

    def update_plot(self, pts, hull_vs):
        """
        Перемалювати точки і замкнений многокутник оболонки.
        """
        self.ax.clear()
        self.ax.scatter([p.x for p in pts], [p.y for p in pts], s=12)

        if hull_vs:
            ring = hull_vs + hull_vs[:1]
            self.ax.plot([p.x for p in ring], [p.y for p in ring], linewidth=1.0)
            # pivot — остання вершина обходу
            self.ax.scatter([hull_vs[-1].x], [hull_vs[-1].y], s=40, marker="s")

        self.ax.set_aspect("equal", adjustable="datalim")
        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.ax.set_title("Convex Hull")
        self.canvas.draw()

    def run_hull(self):
        if self.input_mode.get() == "random":
            try:
                n = int(self.n_entry.get())
                if n < 1:
                    raise ValueError
            except ValueError:
                messagebox.showerror("Помилка", "Кількість точок має бути додатним цілим числом.")
                return
            points = generate_random_points(n)
        else:  # manual
            raw_text = self.points_text.get("1.0", "end").strip()
            try:
                points = parse_points_from_text(raw_text)
            except ValueError as e:
                messagebox.showerror("Помилка парсингу точок", str(e))
                return

        hull = ConvexHull2D(points)
        report = hull.validate()
        vs = hull.vertices()
        self.update_plot(hull.P, vs)

        self.points_var.set(str(len(hull.P)))
        self.vertices_var.set(str(len(vs)) + (" (вироджена)" if report["degenerate"] else ""))
        if report["foreign_vertices"] or report["bad_turns"] or report["outside_points"] or report["pivot_missing"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")

        print(hull.to_text())
        print("VALIDATION:", report)


if __name__ == "__main__":
    app = HullApp()
    app.mainloop()
