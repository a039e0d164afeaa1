import itertools
import logging
import random

import pygame
from constants import BLACK, BOARD, FPS, GRID, HEIGHT, PICK_RADIUS, PIN_RADIUS, STRING_COLORS, WIDTH
from ropesim.Vec2 import Vec2
from ropesim.curve import CurveRenderer
from ropesim.layer import StringsLayer
from ropesim.logging_config import setup_logging
from ropesim.rope import DAMPING, GRAVITY, TENSION, WIND

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger("ropesim.app")


class Board:
    """Pins on a cork board and the strings between them. Pins are the string anchors."""

    def __init__(self):
        self.pins = []
        self.connections = []
        self._ids = itertools.count(1)

    def add_pin(self, pos):
        self.pins.append(Vec2.of(pos))
        return len(self.pins) - 1

    def connect(self, a, b, color=None):
        if a == b:
            return None
        for _, i, j, _ in self.connections:
            if {i, j} == {a, b}:
                return None
        if color is None:
            color = random.randrange(len(STRING_COLORS))
        conn_id = next(self._ids)
        self.connections.append((conn_id, a, b, color))
        return conn_id

    def disconnect(self, pin):
        self.connections = [c for c in self.connections if pin not in (c[1], c[2])]

    def anchors(self):
        for conn_id, a, b, color in self.connections:
            yield conn_id, self.pins[a], self.pins[b], STRING_COLORS[color % len(STRING_COLORS)]


def setup_board():
    board = Board()
    a = board.add_pin((200, 180))
    b = board.add_pin((520, 140))
    c = board.add_pin((780, 320))
    d = board.add_pin((360, 480))
    board.connect(a, b, 0)
    board.connect(b, c, 3)
    board.connect(a, d, 1)
    board.connect(d, c, 2)
    return board


def get_pin_under_cursor(mx, my, board):
    for i, p in enumerate(board.pins):
        dx = p.x - mx
        dy = p.y - my
        if (dx * dx + dy * dy) <= PICK_RADIUS ** 2:
            return i
    return None


def draw_board(screen):
    screen.fill(BOARD)
    for x in range(0, WIDTH, 40):
        pygame.draw.line(screen, GRID, (x, 0), (x, HEIGHT), 1)
    for y in range(0, HEIGHT, 40):
        pygame.draw.line(screen, GRID, (0, y), (WIDTH, y), 1)


def main():
    setup_logging(logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Strings")
    clock = pygame.time.Clock()

    board = setup_board()
    layer = StringsLayer()
    pin_renderer = CurveRenderer()
    layer.sync(board.anchors())

    running = True
    paused = False
    show_chain = False
    dragged_pin = None
    first_pin_for_string = None

    font = pygame.font.Font(None, 28)

    # DearPyGui control panel runs in its own process
    _mgr = Manager()
    _shared = _mgr.dict()
    _shared['gravity'] = GRAVITY
    _shared['damping'] = DAMPING
    _shared['wind'] = WIND
    _shared['tension'] = TENSION
    _shared['show_chain'] = False
    _shared['toggle_pause'] = False
    _shared['reset_board'] = False
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                dragged_pin = get_pin_under_cursor(mx, my, board)
                if dragged_pin is None:
                    board.add_pin((mx, my))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragged_pin = None
            elif event.type == pygame.MOUSEMOTION:
                if dragged_pin is not None:
                    board.pins[dragged_pin] = Vec2.of(event.pos)
            elif event.type == pygame.KEYDOWN:
                mx, my = pygame.mouse.get_pos()
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    pin = get_pin_under_cursor(mx, my, board)
                    if first_pin_for_string is None:
                        first_pin_for_string = pin
                    else:
                        if pin is not None:
                            board.connect(first_pin_for_string, pin)
                        first_pin_for_string = None
                elif event.key == pygame.K_x:
                    pin = get_pin_under_cursor(mx, my, board)
                    if pin is not None:
                        board.disconnect(pin)
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    board = setup_board()
                    layer.clear()

        # --- Handle GUI updates ---
        if _shared.get('toggle_pause', False):
            paused = not paused
            _shared['toggle_pause'] = False
        if _shared.get('reset_board', False):
            board = setup_board()
            layer.clear()
            _shared['reset_board'] = False
        if _shared.get('__exit__', False):
            running = False
        layer.apply_settings(gravity=_shared.get('gravity', GRAVITY),
                             damping=_shared.get('damping', DAMPING),
                             wind=_shared.get('wind', WIND),
                             tension=_shared.get('tension', TENSION))
        show_chain = bool(_shared.get('show_chain', show_chain))

        # anchors are only pushed to ropes whose pins moved
        layer.sync(board.anchors())
        _shared['string_count'] = len(layer)

        # --- Update ---
        if not paused:
            layer.step()

        # --- Draw ---
        draw_board(screen)
        layer.draw(screen, pins=False)
        if show_chain:
            for rope in layer.ropes.values():
                rope.solver.draw(screen, color=BLACK)

        for p in board.pins:
            pin_renderer.draw_pin(screen, p, PIN_RADIUS)

        if paused:
            pause_text = font.render("PAUSED", True, BLACK)
            screen.blit(pause_text, (WIDTH - pause_text.get_width() - 10, 10))

        count_surf = font.render(f"Strings: {len(layer)}", True, BLACK)
        screen.blit(count_surf, (10, HEIGHT - 30))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    _shared['__exit__'] = True
    _gui_proc.join(timeout=1.0)

    pygame.quit()


if __name__ == "__main__":
    main()
