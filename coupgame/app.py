"""The setup screen: name a game, seat players, then start playing."""

from __future__ import annotations

from typing import List, Optional, Sequence

from coupgame.game import Game
from coupgame.gui import WINDOW_SIZE, WINDOW_TITLE, GameGUI, _load_font
from coupgame.player import Player
from coupgame.roles import GameError

MIN_PLAYERS = 2
NOT_ENOUGH_PLAYERS = "At least 2 players are required to start."
BACKSPACE = "\b"

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_INPUT_GREY = (200, 200, 200)
_CREATE_BLUE = (100, 150, 250)
_START_GREEN = (100, 250, 150)


class SetupState:
    """What the setup screen holds: typed text, the game and its players."""

    def __init__(self) -> None:
        self.input_text = ""
        self.game: Optional[Game] = None
        self.players: List[Player] = []
        self.error_message = ""

    @property
    def game_created(self) -> bool:
        return self.game is not None

    @property
    def instructions(self) -> str:
        return "Enter Player Name:" if self.game_created else "Enter Game Name:"

    @property
    def button_label(self) -> str:
        return "Add Player" if self.game_created else "Create Game"

    def type_char(self, char: str) -> None:
        """Append a printable ASCII character; a backspace removes the last one."""
        if char == BACKSPACE:
            self.backspace()
        elif len(char) == 1 and " " <= char <= "~":
            self.input_text += char

    def backspace(self) -> None:
        """Remove the last typed character, if there is one."""
        self.input_text = self.input_text[:-1]

    def press_create(self) -> None:
        """Create the game from the typed name, or seat a player once it exists."""
        if not self.input_text:
            return
        if self.game is None:
            self.game = Game(self.input_text)
            self.input_text = ""
            self.error_message = ""
            return
        try:
            player = Player(self.input_text, self.game)
            self.game.add_player(player)
        except GameError as error:
            self.error_message = str(error)
            return
        self.players.append(player)
        self.input_text = ""
        self.error_message = ""

    def press_start(self) -> bool:
        """Return True if play can begin; otherwise record why not."""
        if self.game is not None and len(self.players) >= MIN_PLAYERS:
            return True
        self.error_message = NOT_ENOUGH_PLAYERS
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the setup screen, then the game window once play starts."""
    import pygame

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    font = _load_font(24)
    small_font = _load_font(20)

    state = SetupState()
    input_box = pygame.Rect(50, 100, 400, 40)
    create_button = pygame.Rect(50, 160, 200, 50)
    start_button = pygame.Rect(50, 230, 200, 50)
    clock = pygame.time.Clock()
    pygame.key.start_text_input()

    start_game = False
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.TEXTINPUT:
                for char in event.text:
                    state.type_char(char)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
                state.backspace()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if create_button.collidepoint(event.pos):
                    state.press_create()
                if start_button.collidepoint(event.pos) and state.press_start():
                    start_game = True
                    running = False
        if not running:
            break

        screen.fill(_BLACK)
        screen.blit(font.render(state.instructions, True, _WHITE), (50, 50))
        pygame.draw.rect(screen, _INPUT_GREY, input_box)
        screen.blit(font.render(state.input_text, True, _WHITE), (50, 100))
        pygame.draw.rect(screen, _CREATE_BLUE, create_button)
        screen.blit(font.render(state.button_label, True, _WHITE), (70, 165))

        if state.game_created:
            pygame.draw.rect(screen, _START_GREEN, start_button)
            screen.blit(font.render("Start Game", True, _WHITE), (70, 235))
            screen.blit(small_font.render("Players:", True, _WHITE), (500, 50))
            for row, player in enumerate(state.players):
                info = f"{player.name} ({player.role_name()})"
                screen.blit(small_font.render(info, True, _WHITE), (500, 80 + row * 30))

        if state.error_message:
            screen.blit(small_font.render(state.error_message, True, _RED), (50, 300))

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()
    if start_game and state.game is not None:
        GameGUI(state.game).run()
    return 0