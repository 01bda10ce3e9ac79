"""
poo_snake module: render/renderer.py

Pygame rendering of both game variants (top-down, one cell = CELL_SIZE px).
"""

from __future__ import annotations
from typing import List, Tuple
import pygame

import config
from render import colors
from snake.player import Player
from world.food import Food, FoodColor
from world.grid import Point, is_collide
from world.poo import Poo

HUD_FONT_SIZE = 22
HUD_LINE_H = 18
HUD_MARGIN = 6


def make_head_image(cell: int = config.CELL_SIZE) -> pygame.Surface:
    # triangle pointing up; rotated per heading at draw time
    img = pygame.Surface((cell, cell), pygame.SRCALPHA)
    s = cell / 20.0
    points = [(9 * s, 0), (2 * s, 19 * s), (16 * s, 19 * s)]
    pygame.draw.polygon(img, colors.HEAD, points, 1)
    return img


def cell_rect(p: Point, cell: int = config.CELL_SIZE) -> pygame.Rect:
    x, y = p.to_pixels(cell)
    return pygame.Rect(x, y, cell, cell)


def draw_player(screen: pygame.Surface, player: Player, head_img: pygame.Surface) -> None:
    for b in player.bodies:
        pygame.draw.rect(screen, colors.BODY, cell_rect(b), 1)

    # pygame rotates counter-clockwise; our angles are clockwise
    rotated = pygame.transform.rotate(head_img, -player.get_angle())
    r = rotated.get_rect(center=cell_rect(player.p).center)
    screen.blit(rotated, r)


def draw_food(screen: pygame.Surface, foods: List[Food]) -> None:
    radius = config.CELL_SIZE // 2 - 3
    for f in foods:
        pygame.draw.circle(screen, colors.FOOD[f.color], cell_rect(f.p).center, radius)


def draw_poos(screen: pygame.Surface, poos: List[Poo]) -> None:
    inset = config.CELL_SIZE // 5
    for p in poos:
        pygame.draw.ellipse(screen, colors.POO, cell_rect(p.p).inflate(-inset, -inset))


def draw_game_over(screen: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill(colors.GAME_OVER)
    screen.blit(overlay, (0, 0))


def hud_lines(game) -> List[str]:
    lines = [f"{game.score:>8}"]
    if hasattr(game, "ate_counts"):
        lines.append(f"Energy: {game.energy:>3}/{config.ENERGY_MAX}")
        lines.append("  ".join(f"{c.value[0].upper()}:{game.ate_counts[c]}" for c in FoodColor.spawn_order()))
    return lines


def hud_rect(screen_size: Tuple[int, int], line_count: int, width: int, at_bottom: bool) -> pygame.Rect:
    sw, sh = screen_size
    h = line_count * HUD_LINE_H + HUD_MARGIN * 2
    w = width + HUD_MARGIN * 2
    y = sh - h if at_bottom else 0
    return pygame.Rect(sw - w, y, w, h)


def hud_blocks_head(rect: pygame.Rect, head: Point) -> bool:
    hx, hy = head.to_pixels()
    c = config.CELL_SIZE
    return is_collide(rect.x, rect.y, rect.w, rect.h, hx, hy, c, c)


def draw_hud(screen: pygame.Surface, game) -> pygame.Rect:
    """
    Score (8-wide, right aligned), energy and per-color meals in the top-right.
    Drops to the bottom edge while the head is underneath it.
    """
    font = pygame.font.Font(None, HUD_FONT_SIZE)
    rendered = [font.render(line, True, colors.HUD_TEXT) for line in hud_lines(game)]
    width = max(t.get_width() for t in rendered)

    rect = hud_rect(screen.get_size(), len(rendered), width, at_bottom=False)
    if hud_blocks_head(rect, game.player.p):
        rect = hud_rect(screen.get_size(), len(rendered), width, at_bottom=True)

    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill(colors.HUD_PANEL)
    screen.blit(panel, rect.topleft)

    y = rect.y + HUD_MARGIN
    for txt in rendered:
        screen.blit(txt, (rect.right - HUD_MARGIN - txt.get_width(), y))
        y += HUD_LINE_H
    return rect


def render_game(screen: pygame.Surface, game, head_img: pygame.Surface) -> None:
    screen.fill(colors.BG)
    if hasattr(game, "foods"):
        draw_food(screen, game.foods.active())
        draw_poos(screen, game.poos.active())
    draw_player(screen, game.player, head_img)
    if game.is_over:
        draw_game_over(screen)
    draw_hud(screen, game)
