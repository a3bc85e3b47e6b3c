"""Core data types for the Breakout simulation."""

from dataclasses import dataclass, field

from breakout import arena


@dataclass
class Ball:
    """Ball center, per-tick velocity and radius."""
    x: float = arena.ARENA_WIDTH / 2
    y: float = arena.ARENA_HEIGHT - arena.BALL_START_OFFSET
    dx: float = arena.BALL_START_DX
    dy: float = arena.BALL_START_DY
    radius: float = arena.BALL_RADIUS

    def copy(self) -> "Ball":
        return Ball(self.x, self.y, self.dx, self.dy, self.radius)


@dataclass
class Paddle:
    """Paddle left edge and size. Its top edge sits at arena height - height."""
    x: float = arena.ARENA_WIDTH / 2 - arena.PADDLE_WIDTH / 2
    width: float = arena.PADDLE_WIDTH
    height: float = arena.PADDLE_HEIGHT

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def copy(self) -> "Paddle":
        return Paddle(self.x, self.width, self.height)


@dataclass
class Brick:
    """Axis-aligned destructible brick."""
    x: float
    y: float
    width: float
    height: float
    color: str = "#FFFFFF"
    visible: bool = True
    row: int = 0
    col: int = 0

    def contains(self, px: float, py: float) -> bool:
        """Strict point-in-rectangle test (edges excluded)."""
        return (
            self.x < px < self.x + self.width
            and self.y < py < self.y + self.height
        )

    def copy(self) -> "Brick":
        return Brick(
            self.x, self.y, self.width, self.height,
            color=self.color, visible=self.visible, row=self.row, col=self.col,
        )


# --- Read-only views handed to the renderer ---


@dataclass(frozen=True)
class BallView:
    x: float
    y: float
    dx: float
    dy: float
    radius: float


@dataclass(frozen=True)
class PaddleView:
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class BrickView:
    x: float
    y: float
    width: float
    height: float
    color: str
    visible: bool

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the simulation after a tick."""
    width: float
    height: float
    paddle: PaddleView
    ball: BallView
    bricks: tuple  # tuple[BrickView, ...] in grid order
    score: int
    game_over: bool
    game_won: bool
    tick: int

    @property
    def terminal(self) -> bool:
        return self.game_over or self.game_won

    @property
    def visible_bricks(self) -> list[tuple[tuple[float, float, float, float], str]]:
        """(rect, color) pairs for every brick still standing."""
        return [(b.rect, b.color) for b in self.bricks if b.visible]

    @property
    def bricks_remaining(self) -> int:
        return sum(1 for b in self.bricks if b.visible)


@dataclass
class GameState:
    """The single mutable aggregate owned by the simulation core."""
    width: float = arena.ARENA_WIDTH
    height: float = arena.ARENA_HEIGHT
    paddle: Paddle = field(default_factory=Paddle)
    ball: Ball = field(default_factory=Ball)
    bricks: list = field(default_factory=list)  # list[Brick]
    score: int = 0
    game_over: bool = False
    game_won: bool = False
    tick: int = 0

    @property
    def terminal(self) -> bool:
        return self.game_over or self.game_won

    def copy(self) -> "GameState":
        return GameState(
            width=self.width,
            height=self.height,
            paddle=self.paddle.copy(),
            ball=self.ball.copy(),
            bricks=[b.copy() for b in self.bricks],
            score=self.score,
            game_over=self.game_over,
            game_won=self.game_won,
            tick=self.tick,
        )

    def snapshot(self) -> Snapshot:
        p, b = self.paddle, self.ball
        return Snapshot(
            width=self.width,
            height=self.height,
            paddle=PaddleView(p.x, self.height - p.height, p.width, p.height),
            ball=BallView(b.x, b.y, b.dx, b.dy, b.radius),
            bricks=tuple(
                BrickView(k.x, k.y, k.width, k.height, k.color, k.visible)
                for k in self.bricks
            ),
            score=self.score,
            game_over=self.game_over,
            game_won=self.game_won,
            tick=self.tick,
        )


# --- Per-tick collision events ---


@dataclass
class WallBounce:
    """Ball reflected off an arena wall."""
    x: float
    y: float
    tick: int
    side: str  # "left", "right" or "top"


@dataclass
class PaddleHit:
    """Ball bounced off the paddle."""
    x: float
    y: float
    tick: int
    offset: float  # ball x minus paddle center at contact


@dataclass
class BrickHit:
    """Ball destroyed a brick."""
    x: float
    y: float
    tick: int
    index: int
    row: int
    col: int


@dataclass
class BallLost:
    """Ball fell below the arena; the match is lost."""
    x: float
    y: float
    tick: int


@dataclass
class BoardCleared:
    """Last brick destroyed; the match is won."""
    tick: int
