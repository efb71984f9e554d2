import argparse
import sys

import matplotlib.pyplot as plt
import matplotlib.widgets as widgets
import numpy as np
import requests

from maze_engine.utils.consts import API_URL

# Heading name → arrow (dx, dy) in image coordinates (rows grow downwards)
HEADING_ARROW = {"NORTH": (0, -0.35), "EAST": (0.35, 0), "SOUTH": (0, 0.35), "WEST": (-0.35, 0)}


def maze_to_array(lines):
    """1.0 for walls, 0.0 for everything else."""
    return np.array([[1.0 if ch == '#' else 0.0 for ch in row] for row in lines])


class InteractiveDashboard:

    # =========================================================================
    # INIT
    # =========================================================================

    def __init__(self, maze_text, api_url=API_URL):
        self.api_url = api_url

        # --- Maze state ---
        self.original = [list(line) for line in maze_text.strip("\n").splitlines()]
        self.lines    = [row[:] for row in self.original]

        # --- Result state ---
        self.tiles     = []     # [{row, col}] optimal-path union
        self.path      = []     # [{row, col, d}] one optimal path
        self.commands  = []
        self.min_score = None

        # --- Playback state ---
        self.current_frame = 0
        self.is_playing    = False

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(10, 11))
        plt.subplots_adjust(bottom=0.18)

        self.timer = self.fig.canvas.new_timer(interval=60)
        self.timer.add_callback(self.play_step)

        self.btn_prev = widgets.Button(plt.axes([0.05, 0.07, 0.12, 0.06]), '<< Prev')
        self.btn_prev.on_clicked(self.prev_step)

        self.btn_play = widgets.Button(plt.axes([0.19, 0.07, 0.12, 0.06]), 'Play', color='lightgreen')
        self.btn_play.on_clicked(self.toggle_play)

        self.btn_next = widgets.Button(plt.axes([0.33, 0.07, 0.12, 0.06]), 'Next >>')
        self.btn_next.on_clicked(self.next_step)

        self.btn_run = widgets.Button(plt.axes([0.52, 0.07, 0.20, 0.06]), 'Solve Maze', color='lightblue')
        self.btn_run.on_clicked(self.run_solver)

        self.btn_clear = widgets.Button(plt.axes([0.75, 0.07, 0.12, 0.06]), 'Reset', color='salmon')
        self.btn_clear.on_clicked(self.reset_maze)

        self.ax_status = plt.axes([0.05, 0.01, 0.9, 0.05])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=8.5, color='gray',
        )

        self.cid = self.fig.canvas.mpl_connect('button_press_event', self.on_click)
        self.redraw()
        plt.show()

    # =========================================================================
    # PLAYBACK
    # =========================================================================

    def toggle_play(self, event):
        if not self.path: return
        if self.is_playing:
            self.stop_playback()
        else:
            if self.current_frame >= len(self.path) - 1:
                self.current_frame = 0
            self.is_playing = True
            self.btn_play.label.set_text('Pause')
            self.timer.start()

    def stop_playback(self):
        self.is_playing = False
        self.btn_play.label.set_text('Play')
        self.timer.stop()
        self.fig.canvas.draw_idle()

    def play_step(self):
        if self.current_frame < len(self.path) - 1:
            self.current_frame += 1
            self.redraw()
        else:
            self.stop_playback()

    def prev_step(self, event):
        self.stop_playback()
        if self.current_frame > 0:
            self.current_frame -= 1
            self.redraw()

    def next_step(self, event):
        self.stop_playback()
        if self.path and self.current_frame < len(self.path) - 1:
            self.current_frame += 1
            self.redraw()

    # =========================================================================
    # WALL EDITING (grid clicks)
    # =========================================================================

    def on_click(self, event):
        if event.inaxes != self.ax or event.button != 1: return
        col, row = int(round(event.xdata)), int(round(event.ydata))
        if not (0 <= row < len(self.lines) and 0 <= col < len(self.lines[row])): return

        ch = self.lines[row][col]
        if ch in 'SE': return           # start and end stay put
        self.lines[row][col] = '.' if ch == '#' else '#'
        self.clear_result()
        self._set_status("Maze edited, click Solve Maze", "gray")
        self.redraw()

    def clear_result(self):
        self.stop_playback()
        self.tiles = []
        self.path = []
        self.commands = []
        self.min_score = None
        self.current_frame = 0

    def reset_maze(self, event):
        self.lines = [row[:] for row in self.original]
        self.clear_result()
        self._set_status("Maze reset", "gray")
        self.redraw()

    # =========================================================================
    # SOLVE  (/solve call)
    # =========================================================================

    def run_solver(self, event):
        self.clear_result()
        self._set_status("Solving...", "orange")
        self.fig.canvas.draw()

        maze = "\n".join("".join(row) for row in self.lines)
        try:
            res = requests.post(self.api_url, json={"maze": maze}, timeout=30)
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
            return

        if res.status_code != 200:
            self._set_status(f"Server error {res.status_code}: {res.text[:80]}", "red")
            return

        data = res.json()
        if not data['reachable']:
            self._set_status("End is unreachable from start.", "red")
            self.redraw()
            return

        self.tiles     = data['tiles']
        self.path      = data['path']
        self.commands  = data['commands']
        self.min_score = data['min_score']
        self._set_status(
            f"Score {self.min_score}, {data['tile_count']} best-path tiles, "
            f"{len(self.commands)} commands: {' '.join(self.commands[:12])}"
            f"{' ...' if len(self.commands) > 12 else ''}",
            "blue",
        )
        self.redraw()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def _set_status(self, msg, color="gray"):
        self.status_text.set_text(f"Status: {msg}")
        self.status_text.set_color(color)
        self.fig.canvas.draw_idle()

    def redraw(self):
        self.ax.clear()
        self.ax.imshow(maze_to_array(self.lines), cmap='Greys', vmin=0, vmax=1.3)

        for r, row in enumerate(self.lines):
            for c, ch in enumerate(row):
                if ch in 'SE':
                    self.ax.text(c, r, ch, ha='center', va='center',
                                 fontsize=10, fontweight='bold', color='darkred')

        if self.tiles:
            self.ax.scatter([t['col'] for t in self.tiles], [t['row'] for t in self.tiles],
                            s=40, c='gold', alpha=0.6, marker='s', zorder=2)

        if self.path:
            cols = [p['col'] for p in self.path[:self.current_frame + 1]]
            rows = [p['row'] for p in self.path[:self.current_frame + 1]]
            self.ax.plot(cols, rows, color='royalblue', linewidth=2, zorder=3)

            agent = self.path[self.current_frame]
            dx, dy = HEADING_ARROW[agent['d']]
            self.ax.arrow(agent['col'] - dx, agent['row'] - dy, 2 * dx, 2 * dy,
                          head_width=0.35, color='crimson', length_includes_head=True, zorder=4)

        title = "Reindeer Maze"
        if self.min_score is not None:
            title += f": score {self.min_score}, step {self.current_frame}/{len(self.path) - 1}"
        self.ax.set_title(title)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.fig.canvas.draw_idle()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive viewer for the maze server.")
    parser.add_argument("maze_path", help="Path to a maze text file.")
    parser.add_argument("--api-url", default=API_URL, help="Solve endpoint (default: %(default)s).")
    args = parser.parse_args(argv)

    with open(args.maze_path) as f:
        InteractiveDashboard(f.read(), api_url=args.api_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
