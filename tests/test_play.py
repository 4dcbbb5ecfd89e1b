"""
Tests for play.py - pygame input mapping and renderer.
"""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game import Game, Key
from play import (
    BACK_COLOR, BLOCK_SIZE, BORDER_COLOR, FOOD_COLOR, SNAKE_COLOR,
    PygameRenderer,
    to_coord,
    to_key,
)


class TestInputMapping:
    """Tests for pygame key translation."""

    @pytest.mark.parametrize("pygame_key,key", [
        (pygame.K_UP, Key.UP),
        (pygame.K_w, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_d, Key.RIGHT),
        (pygame.K_SPACE, Key.OTHER),
    ])
    def test_to_key(self, pygame_key, key):
        assert to_key(pygame_key) is key


class TestRenderer:
    """Tests for PygameRenderer on an off-screen surface."""

    def test_to_coord(self):
        assert to_coord(2) == 2 * BLOCK_SIZE

    def test_paints_cells(self):
        """Snake, food, walls and background land on their blocks."""
        game = Game(10, 8)
        surface = pygame.Surface((to_coord(10), to_coord(8)))
        game.draw(PygameRenderer(surface))

        def color_at(x, y):
            return tuple(surface.get_at((to_coord(x) + 1, to_coord(y) + 1)))[:3]

        assert color_at(4, 2) == SNAKE_COLOR
        assert color_at(6, 4) == FOOD_COLOR
        assert color_at(0, 0) == BORDER_COLOR
        assert color_at(9, 7) == BORDER_COLOR
        assert color_at(5, 5) == BACK_COLOR

    def test_game_over_overlay(self):
        """The overlay tints the background when the game is over."""
        game = Game(10, 8)
        game.game_over = True
        surface = pygame.Surface((to_coord(10), to_coord(8)))
        game.draw(PygameRenderer(surface))
        assert tuple(surface.get_at((to_coord(5) + 1, to_coord(5) + 1)))[:3] != BACK_COLOR
