"""Pygame-based board renderer and click-to-move input."""

from ..Board import BLACK, WHITE, color_name
from ..Move import SIDE, path_move
from ..engine import referee


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_WHITE_PIECE = (245, 245, 240)
    COLOR_BLACK_PIECE = (25, 25, 25)
    COLOR_SELECTED = (200, 0, 0)

    PANEL_HEIGHT = 80
    MARGIN_FRACTION = 0.1

    def __init__(self, window_size=600):
        import pygame

        self.window_size = window_size
        self._pygame = pygame
        self.selection = []
        self.message = None

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT))
        pygame.display.set_caption("Qirkat")

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        self.margin_px = window_size * self.MARGIN_FRACTION
        self.tile_size = (window_size - 2 * self.margin_px) / (SIDE - 1)
        self.board_origin = (self.margin_px, self.PANEL_HEIGHT + self.margin_px)

    def attach(self, board):
        """Redraw whenever BOARD changes."""
        board.subscribe(self._on_board_change)
        self.render(board)

    def detach(self, board):
        board.unsubscribe(self._on_board_change)

    def _on_board_change(self, board):
        self.selection = []
        self.render(board)

    def _square_center(self, k):
        ox, oy = self.board_origin
        col, row = k % SIDE, k // SIDE
        # Row 1 is drawn at the bottom
        return ox + col * self.tile_size, oy + (SIDE - 1 - row) * self.tile_size

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        area = pygame.Rect(0, self.PANEL_HEIGHT, self.window_size, self.window_size)
        pygame.draw.rect(self.screen, self.COLOR_WOOD, area)
        for i in range(SIDE):
            pygame.draw.line(self.screen, self.COLOR_GRID, self._square_center(i * SIDE),
                             self._square_center(i * SIDE + SIDE - 1), 2)
            pygame.draw.line(self.screen, self.COLOR_GRID, self._square_center(i),
                             self._square_center(i + (SIDE - 1) * SIDE), 2)
        # Diagonals run only through even squares
        for k in range(0, SIDE * SIDE, 2):
            col, row = k % SIDE, k // SIDE
            if col < SIDE - 1 and row < SIDE - 1:
                pygame.draw.line(self.screen, self.COLOR_GRID, self._square_center(k),
                                 self._square_center(k + SIDE + 1), 2)
            if col > 0 and row < SIDE - 1:
                pygame.draw.line(self.screen, self.COLOR_GRID, self._square_center(k),
                                 self._square_center(k + SIDE - 1), 2)

    def _draw_pieces(self, board):
        radius = self.tile_size * 0.3
        for k, piece in enumerate(board.cells):
            if piece not in (WHITE, BLACK):
                continue
            fill = self.COLOR_WHITE_PIECE if piece == WHITE else self.COLOR_BLACK_PIECE
            self._pygame.draw.circle(self.screen, fill, self._square_center(k), radius)
            self._pygame.draw.circle(self.screen, self.COLOR_GRID, self._square_center(k), radius, 2)

    def _draw_selection(self):
        for k in self.selection:
            self._pygame.draw.circle(self.screen, self.COLOR_SELECTED, self._square_center(k),
                                     self.tile_size * 0.36, 4)

    def _draw_info_panel(self, board):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        center = (self.window_size / 2, self.PANEL_HEIGHT / 2)
        if board.game_over():
            msg = f"{color_name(-board.whose_move())} Wins!"
            self._draw_text(msg, self.font_large, self.COLOR_TEXT, center)
        else:
            msg = self.message or f"{color_name(board.whose_move())} to move"
            self._draw_text(msg, self.font_medium, self.COLOR_TEXT, center)

    def render(self, board):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid()
        self._draw_pieces(board)
        self._draw_selection()
        self._draw_info_panel(board)
        self._pygame.display.flip()

    def _get_square_from_mouse(self, pos):
        mx, my = pos
        ox, oy = self.board_origin
        col = int(round((mx - ox) / self.tile_size))
        row = SIDE - 1 - int(round((my - oy) / self.tile_size))
        if 0 <= col < SIDE and 0 <= row < SIDE:
            return row * SIDE + col
        return None

    def wait_for_move(self, board, player_color):
        """
        Collect clicked squares until they form a legal move for PLAYER_COLOR
        and return its text, or None if the window is closed.
        """
        pygame = self._pygame
        self.selection = []
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if event.type != pygame.MOUSEBUTTONDOWN:
                    continue
                square = self._get_square_from_mouse(event.pos)
                if square is None:
                    continue
                status = referee.classify_input(board, self.selection + [square])
                if status == referee.COMPLETE:
                    text = str(path_move(self.selection + [square]))
                    self.selection = []
                    return text
                if status == referee.PARTIAL:
                    self.selection.append(square)
                elif referee.classify_input(board, [square]) == referee.PARTIAL:
                    self.selection = [square]
                else:
                    self.selection = []

            self.render(board)
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
