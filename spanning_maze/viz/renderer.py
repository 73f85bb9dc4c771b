import pygame
from spanning_maze.core.grid import Grid
from spanning_maze.viz.recorder import VideoRecorder

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_ENDPOINT = (60, 100, 160)# Blue tint
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, grid: Grid, generator, solver_cls=None, width=1280, height=720, record=False):
        self.grid = grid
        self.generator = generator
        # Built once the generator has produced its graph
        self.solver_cls = solver_cls
        self.solver = None
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = False
        self.solve_finished = solver_cls is None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.cols
        zoom_y = available_h / self.grid.rows

        self.cell_size = min(zoom_x, zoom_y)

        # Center
        total_maze_w = self.grid.cols * self.cell_size
        total_maze_h = self.grid.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Spanning Maze - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def cell_to_screen(self, index):
        row, col = divmod(index, self.grid.cols)
        sx = col * self.cell_size + self.offset_x
        sy = row * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                self.cell_size = max(0.5, min(200.0, self.cell_size))

                # Keep mouse over the same cell
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        # Start / finish cells
        last = len(self.grid) - 1
        for idx in (0, last):
            sx, sy = self.cell_to_screen(idx)
            pygame.draw.rect(self.surface, self.COLOR_ENDPOINT, (sx, sy, size, size))

        # Solution path (Gold)
        for idx in range(len(self.grid)):
            if self.grid.cells[idx] & Grid.PATH:
                sx, sy = self.cell_to_screen(idx)
                pygame.draw.rect(self.surface, self.COLOR_SOLUTION, (sx, sy, size, size))

        if self.cell_size <= 2.0:
            return

        wall_color = self.COLOR_WALL
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                idx = row * self.grid.cols + col
                cell = self.grid.cells[idx]

                px = int(col * self.cell_size + self.offset_x)
                py = int(row * self.cell_size + self.offset_y)

                # South/East for every cell, North/West only on the border
                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)
                if row == 0 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
                if col == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        rec_status = "REC" if self.recorder.active else ""
        if not self.gen_finished:
            status = "Generating"
        elif not self.solve_finished:
            status = "Solving"
        else:
            status = "Done"
        path_len = len(self.solver.path) if self.solver else 0
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.rows}x{self.grid.cols} ({len(self.grid):,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
            f"Path: {path_len}",
            rec_status
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        gen_iter = self.generator.run()
        solver_iter = None

        # Generation may raise (iteration cap); window and video must still close
        try:
            while self.running:
                self.handle_input()

                if not self.gen_finished:
                    try:
                        for _ in range(10):
                            next(gen_iter)
                    except StopIteration:
                        self.gen_finished = True

                # Solving needs the finished graph
                elif not self.solve_finished:
                    if solver_iter is None:
                        self.solver = self.solver_cls(self.generator.graph, self.grid)
                        solver_iter = self.solver.run()
                    try:
                        next(solver_iter)
                    except StopIteration:
                        self.solve_finished = True

                self.draw_grid()
                self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)

                self.clock.tick(60)
        finally:
            self.recorder.stop()
            pygame.quit()
