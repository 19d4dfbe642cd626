"""The in-game window: shows whose turn it is and the active players."""

from __future__ import annotations

import os
from typing import Any, Optional

from coupgame.game import Game
from coupgame.player import Player

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Coup Game GUI"
FONT_PATHS = ("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", "arial.ttf")
NO_PLAYERS = "No players"

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_YELLOW = (255, 255, 0)
_CYAN = (0, 255, 255)
_BUTTON_GREEN = (100, 200, 100)


def _load_font(size: int) -> Any:
    """Load the first available font file, falling back to pygame's own font."""
    import pygame

    pygame.font.init()
    for path in FONT_PATHS:
        if os.path.exists(path):
            try:
                return pygame.font.Font(path, size)
            except (OSError, pygame.error):
                continue
    return pygame.font.Font(None, size)


class TurnTracker:
    """Walks through the active players of a game, one button press at a time."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.index = 0

    def current_player_name(self) -> str:
        """Return the caption naming whose turn it is."""
        players = self.game.players()
        if not players:
            return NO_PLAYERS
        start = self.index % len(players)
        ordered = players[start:] + players[:start]
        for player in ordered:
            if player.active:
                return f"Turn: {player.name}"
        return NO_PLAYERS

    def advance(self) -> Optional[str]:
        """Let the current player act and move on; return who acted, if anyone."""
        players = self.game.players()
        for _ in range(len(players)):
            self.index %= len(players)
            current = players[self.index]
            self.index += 1
            if current.active:
                print(f"Action: {current.name} performed an action.")
                return current.name
        return None


class GameGUI:
    """A pygame window that shows the turn and lets players take turns."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.tracker = TurnTracker(game)

    def _draw_player_info(self, surface: Any, font: Any, role_font: Any, player: Player, y: float) -> None:
        surface.blit(font.render(player.name, True, _WHITE), (50, y))
        surface.blit(role_font.render(f"Role: {player.role_name()}", True, _YELLOW), (50, y + 30))

    def run(self) -> None:
        """Open the window and run until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            name_font = _load_font(24)
            role_font = _load_font(20)
            turn_font = _load_font(28)
            button = pygame.Rect(50, 500, 200, 50)
            button_label = name_font.render("Perform Action", True, _BLACK)
            clock = pygame.time.Clock()

            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif (
                        event.type == pygame.MOUSEBUTTONDOWN
                        and event.button == 1
                        and button.collidepoint(event.pos)
                    ):
                        self.tracker.advance()

                screen.fill(_BLACK)
                caption = turn_font.render(self.tracker.current_player_name(), True, _CYAN)
                screen.blit(caption, (50, 20))

                y = 80.0
                for player in self.game.players():
                    if not player.active:
                        continue
                    self._draw_player_info(screen, name_font, role_font, player, y)
                    y += 70.0

                pygame.draw.rect(screen, _BUTTON_GREEN, button)
                screen.blit(button_label, (70, 510))
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()