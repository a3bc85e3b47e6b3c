"""Pygame host — window, pointer binding, rendering and restart control.

The simulation core never sees pygame. This module translates mouse motion
into SimulationCore.set_paddle_target(), calls advance() once per frame and
hands the snapshot to a Renderer.
"""

try:
    import pygame
except ImportError:
    pygame = None

from breakout.types import BrickHit, PaddleHit, Snapshot
from breakout.core import SimulationCore
from breakout.autopilot import Autopilot, PLAYSTYLES
from breakout import arena

# Window: play area plus a stats panel on the right
PANEL_W = 240
WIN_W = arena.ARENA_WIDTH + PANEL_W
WIN_H = arena.ARENA_HEIGHT
FPS = 60

# Colors
BG_COLOR = (12, 12, 22)
ARENA_BG = (244, 244, 246)
PADDLE_COLOR = (51, 51, 51)
BALL_COLOR = (51, 51, 51)
ACCENT = (233, 69, 96)
PANEL_BG = (22, 33, 62)
TEXT_WHITE = (224, 224, 224)
TEXT_DIM = (136, 136, 136)
WIN_GREEN = (40, 167, 69)
BUTTON_BLUE = (59, 130, 246)
BUTTON_HOVER = (37, 99, 235)
FLASH_YELLOW = (255, 217, 61)

BUTTON_W, BUTTON_H = 180, 44


def _hex_to_rgb(color: str):
    color = color.lstrip("#")
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def restart_button_rect():
    """Play Again button, centered below the result message."""
    return pygame.Rect(
        (arena.ARENA_WIDTH - BUTTON_W) // 2,
        arena.ARENA_HEIGHT // 2 + 50,
        BUTTON_W,
        BUTTON_H,
    )


class Renderer:
    """Draws snapshots onto a pygame surface. Holds no game state."""

    def __init__(self, screen):
        self.screen = screen
        self.arena_surface = pygame.Surface((arena.ARENA_WIDTH, arena.ARENA_HEIGHT))
        self.font_sm = pygame.font.SysFont("monospace", 13)
        self.font_md = pygame.font.SysFont("arial", 20)
        self.font_title = pygame.font.SysFont("monospace", 15, bold=True)
        self.font_xl = pygame.font.SysFont("arial", 48, bold=True)
        self.flash_ticks = 0

    def render(self, snap: Snapshot, events=(), mode="mouse", hover=False):
        self.screen.fill(BG_COLOR)
        surf = self.arena_surface
        surf.fill(ARENA_BG)

        for rect, color in snap.visible_bricks:
            pygame.draw.rect(surf, _hex_to_rgb(color), pygame.Rect(*rect))

        if any(isinstance(e, (PaddleHit, BrickHit)) for e in events):
            self.flash_ticks = 4
        paddle_color = FLASH_YELLOW if self.flash_ticks > 0 else PADDLE_COLOR
        self.flash_ticks = max(0, self.flash_ticks - 1)
        pygame.draw.rect(surf, paddle_color, pygame.Rect(*snap.paddle.rect))

        ball = snap.ball
        pygame.draw.circle(surf, BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius))

        surf.blit(self.font_md.render(f"Score: {snap.score}", True, PADDLE_COLOR), (8, 6))

        if snap.terminal:
            self._draw_result(surf, snap, hover)

        self.screen.blit(surf, (0, 0))
        self._draw_panel(snap, mode)
        pygame.display.flip()

    def _draw_result(self, surf, snap: Snapshot, hover: bool):
        overlay = pygame.Surface((arena.ARENA_WIDTH, arena.ARENA_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        surf.blit(overlay, (0, 0))

        msg = "YOU WIN!" if snap.game_won else "GAME OVER"
        txt = self.font_xl.render(msg, True, (255, 255, 255))
        surf.blit(txt, (
            (arena.ARENA_WIDTH - txt.get_width()) // 2,
            arena.ARENA_HEIGHT // 2 - txt.get_height() // 2,
        ))

        button = restart_button_rect()
        pygame.draw.rect(surf, BUTTON_HOVER if hover else BUTTON_BLUE, button, border_radius=8)
        label = self.font_md.render("Play Again", True, (255, 255, 255))
        surf.blit(label, (
            button.centerx - label.get_width() // 2,
            button.centery - label.get_height() // 2,
        ))

    def _draw_panel(self, snap: Snapshot, mode: str):
        px = arena.ARENA_WIDTH
        pygame.draw.rect(self.screen, PANEL_BG, (px, 0, PANEL_W, WIN_H))
        pygame.draw.line(self.screen, ACCENT, (px, 0), (px, WIN_H), 2)

        x, y = px + 14, 14
        self.screen.blit(self.font_title.render("BREAKOUT", True, ACCENT), (x, y))
        y += 30
        rows = [
            ("Score", str(snap.score)),
            ("Bricks left", f"{snap.bricks_remaining}/{len(snap.bricks)}"),
            ("Tick", str(snap.tick)),
            ("Ball dx", f"{snap.ball.dx:+.2f}"),
            ("Ball dy", f"{snap.ball.dy:+.2f}"),
            ("Mode", mode),
        ]
        for name, value in rows:
            self.screen.blit(self.font_sm.render(f"{name:12s}{value}", True, TEXT_WHITE), (x, y))
            y += 18

        if snap.game_won:
            self.screen.blit(self.font_title.render("CLEARED", True, WIN_GREEN), (x, y + 10))
        elif snap.game_over:
            self.screen.blit(self.font_title.render("BALL LOST", True, ACCENT), (x, y + 10))

        hints = ["Mouse: move paddle", "A: autopilot on/off", "R: restart", "Q: quit"]
        y = WIN_H - 18 * len(hints) - 10
        for hint in hints:
            self.screen.blit(self.font_sm.render(hint, True, TEXT_DIM), (x, y))
            y += 18


def run_visualizer(autopilot_style=None):
    """Launch the Pygame host.

    Args:
        autopilot_style: PLAYSTYLES key to start in autopilot mode, or None
            to start with mouse control.
    """
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    pygame.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H))
    pygame.display.set_caption("Breakout")
    clock = pygame.time.Clock()

    core = SimulationCore()
    snap = core.initialize()
    renderer = Renderer(screen)

    style = autopilot_style if autopilot_style in PLAYSTYLES else "steady"
    pilot = Autopilot("Autopilot", style)
    auto_mode = autopilot_style is not None

    running = True
    while running:
        clock.tick(FPS)
        hover = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                if not auto_mode:
                    core.set_paddle_target(event.pos[0])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if snap.terminal and restart_button_rect().collidepoint(event.pos):
                    snap = core.initialize()
                    pilot.reset()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    running = False
                elif event.key == pygame.K_r:
                    snap = core.initialize()
                    pilot.reset()
                elif event.key == pygame.K_a:
                    auto_mode = not auto_mode
                    pilot.reset()

        if auto_mode and not snap.terminal:
            core.set_paddle_target(pilot.target_x(snap))

        snap = core.advance()

        if snap.terminal:
            hover = restart_button_rect().collidepoint(pygame.mouse.get_pos())
        mode = f"auto ({pilot.label})" if auto_mode else "mouse"
        renderer.render(snap, core.last_events, mode=mode, hover=hover)

    pygame.quit()
