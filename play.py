import logging
import sys

import pygame

from game import DEFAULT_CONFIG, Game, Key

logger = logging.getLogger(__name__)

# --- Display ---
BLOCK_SIZE = 25
FPS = 60

# Colors
BACK_COLOR = (128, 128, 128)
SNAKE_COLOR = (0, 204, 0)
FOOD_COLOR = (204, 0, 0)
BORDER_COLOR = (0, 0, 0)
GAMEOVER_COLOR = (230, 0, 0, 128)

KEY_MAP = {
    pygame.K_UP: Key.UP, pygame.K_w: Key.UP,
    pygame.K_DOWN: Key.DOWN, pygame.K_s: Key.DOWN,
    pygame.K_LEFT: Key.LEFT, pygame.K_a: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT, pygame.K_d: Key.RIGHT,
}


def to_coord(game_coord):
    return game_coord * BLOCK_SIZE


def to_key(pygame_key):
    return KEY_MAP.get(pygame_key, Key.OTHER)


class PygameRenderer:
    def __init__(self, screen):
        self.screen = screen

    def rect(self, x, y, w=1, h=1):
        return pygame.Rect(to_coord(x), to_coord(y), to_coord(w), to_coord(h))

    def draw(self, body, food, width, height, game_over):
        self.screen.fill(BACK_COLOR)

        for x, y in body:
            pygame.draw.rect(self.screen, SNAKE_COLOR, self.rect(x, y))

        if food is not None:
            pygame.draw.rect(self.screen, FOOD_COLOR, self.rect(*food))

        # wall ring
        for wall in (self.rect(0, 0, width, 1), self.rect(0, height - 1, width, 1),
                     self.rect(0, 0, 1, height), self.rect(width - 1, 0, 1, height)):
            pygame.draw.rect(self.screen, BORDER_COLOR, wall)

        if game_over:
            overlay = pygame.Surface((to_coord(width), to_coord(height)), pygame.SRCALPHA)
            overlay.fill(GAMEOVER_COLOR)
            self.screen.blit(overlay, (0, 0))


def main(config=DEFAULT_CONFIG):
    pygame.init()
    game = Game.from_config(config)
    screen = pygame.display.set_mode((to_coord(game.width), to_coord(game.height)))
    pygame.display.set_caption("Snake")
    renderer = PygameRenderer(screen)
    clock = pygame.time.Clock()
    best = len(game.snake)

    running = True
    while running:
        was_over = game.game_over
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                game.key_pressed(to_key(e.key))

        game.update(clock.tick(FPS) / 1000.0)
        best = max(best, len(game.snake))
        if game.game_over and not was_over:
            print("Game Over! Len:", len(game.snake))

        game.draw(renderer)
        pygame.display.flip()

    logger.info("Quit, best length %d", best)
    pygame.quit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    main()
    sys.exit()
