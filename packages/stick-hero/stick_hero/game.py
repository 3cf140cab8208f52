"""Game - wires the round machine onto a pace Engine and takes player input."""
from __future__ import annotations

import logging
import random

from pace import Engine
from pace_fsm import FSM, make_fsm_system
from pace_schedule import Schedule, make_periodic_system, make_timer_system
from pace_signal import SignalBus, make_signal_system
from pace_tween import Animator, make_tween_system

from stick_hero.bridge import BridgeResult, stand_x
from stick_hero.callbacks import make_on_anim_complete, make_on_periodic_fire, make_on_timer_fire
from stick_hero.components import Camera, Hero, RoundSession, Scoreboard, Stick
from stick_hero.config import GameConfig
from stick_hero.guards import INITIAL, STICK_GROW, TRANSITIONS, make_guards
from stick_hero.journal import Journal
from stick_hero.snapshot import Frame, take_snapshot
from stick_hero.systems import make_grow_cue_system
from stick_hero.track import PlatformGenerator, PlatformTrack
from stick_hero.transitions import MSG_IDLE, make_on_transition
from stick_hero.types import Phase

logger = logging.getLogger(__name__)


class Game:
    """One player's run: platforms, stick, hero, camera and score.

    Input arrives through :meth:`hold_start`, :meth:`hold_end` and
    :meth:`restart`; time arrives through :meth:`step`. Everything else
    happens inside the tick, in system order: round machine, animations,
    timers, cues, then signal delivery.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        tps: int = 60,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.engine = Engine(tps=tps, seed=seed, rng=rng)
        self.bus = SignalBus()
        self.animator = Animator()
        self.schedule = Schedule()

        self.track = PlatformTrack(PlatformGenerator(self.engine.random, self.config))
        self.stick = Stick()
        self.hero = Hero()
        self.camera = Camera()
        self.scoreboard = Scoreboard()
        self.session: RoundSession | None = None
        self.bridge: BridgeResult | None = None
        self.message = MSG_IDLE

        # Raw input level and a press waiting for the next tick.
        self.hold_signal = False
        self.hold_requested = False

        self.fsm = FSM(state=Phase.IDLE.value, transitions=TRANSITIONS, initial=INITIAL)
        self.journal = Journal(self.bus, lambda: self.engine.clock.elapsed)

        self.engine.add_system(
            make_fsm_system(self.fsm, make_guards(), self, make_on_transition(self))
        )
        self.engine.add_system(make_tween_system(self.animator, make_on_anim_complete(self)))
        self.engine.add_system(make_timer_system(self.schedule, make_on_timer_fire(self)))
        self.engine.add_system(make_periodic_system(self.schedule, make_on_periodic_fire(self)))
        self.engine.add_system(make_grow_cue_system(self))
        self.engine.add_system(make_signal_system(self.bus))

        self._setup_level()

    # -- State --

    @property
    def phase(self) -> Phase:
        return Phase(self.fsm.state)

    @property
    def round_active(self) -> bool:
        return self.session is not None

    @property
    def animating(self) -> bool:
        """True from the drop until the round resolves."""
        return self.phase.animating

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def score(self) -> int:
        return self.scoreboard.score

    def snapshot(self) -> Frame:
        return take_snapshot(self)

    def cue(self, name: str) -> None:
        """Request a sound. Nothing in the game waits for it."""
        self.bus.publish("cue", name=name)

    # -- Input --

    def hold_start(self) -> bool:
        """Press. Starts a round on the next tick; ignored unless idle."""
        if self.phase is not Phase.IDLE:
            return False
        self.hold_signal = True
        self.hold_requested = True
        return True

    def hold_end(self) -> None:
        """Release. Growth stops at once; the drop begins on the next tick."""
        self.hold_signal = False
        if self.session is not None and self.session.holding:
            self.session.holding = False
            self.animator.cancel(STICK_GROW)

    def restart(self) -> bool:
        """Start a new run. Only allowed once the game is over."""
        if self.phase is not Phase.GAME_OVER:
            return False
        self._setup_level()
        self.bus.publish("restarted")
        logger.debug("restart: track reset to %d platforms", len(self.track))
        return True

    # -- Time --

    def step(self, now: float | None = None) -> None:
        self.engine.step(now)

    def run(self, n: int) -> None:
        self.engine.run(n)

    def sync_clock(self, now: float) -> None:
        """Re-base game time on an external millisecond clock."""
        self.engine.clock.reset(self.engine.clock.tick_number, now)

    # -- Setup --

    def _setup_level(self) -> None:
        self.animator.clear()
        self.schedule.clear()
        self.track.spawn_initial()
        self.stick.reset(self.track.pivot_x)
        self.hero.x = stand_x(self.track.current, self.config)
        self.hero.fall = 0.0
        self.hero.pose = "standing"
        self.camera.offset_x = 0.0
        self.scoreboard.reset()
        self.session = None
        self.bridge = None
        self.hold_signal = False
        self.hold_requested = False
        self.message = MSG_IDLE
        self.fsm.state = Phase.IDLE.value
