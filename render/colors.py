"""
poo_snake module: render/colors.py

Central color palette.
"""

from world.food import FoodColor

BG = (0, 0, 0)
HEAD = (0, 255, 0)
BODY = (255, 255, 255)
POO = (139, 90, 43)
HUD_TEXT = (235, 235, 235)
HUD_PANEL = (20, 20, 28, 170)
GAME_OVER = (255, 0, 0, 128)

FOOD = {
    FoodColor.RED: (230, 60, 60),
    FoodColor.GREEN: (70, 210, 90),
    FoodColor.BLUE: (80, 120, 240),
    FoodColor.WHITE: (240, 240, 240),
}
