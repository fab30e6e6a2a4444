from __future__ import annotations

import logging
import math
from dataclasses import replace

from dashrunner.domain.collision import first_collision
from dashrunner.domain.config import GameConfig
from dashrunner.domain.effects import burst, celebration
from dashrunner.domain.entities import (
    GroundSegment,
    LevelUpOverlay,
    Particle,
    Player,
    advance_decoration,
    advance_obstacle,
    advance_particle,
)
from dashrunner.domain.exceptions import PlayerDied
from dashrunner.domain.game_state import GameState
from dashrunner.domain.input_state import InputState
from dashrunner.domain.progression import advance
from dashrunner.domain.rng import RandomSource
from dashrunner.domain.spawner import spawn

logger = logging.getLogger(__name__)


def ground_line(height: float) -> float:
    # Leave room for the track below the ground line, but never let the
    # line rise above 75% of the viewport.
    ground_y = height - 60
    if ground_y < height * 0.7:
        ground_y = height * 0.75
    return ground_y


def build_ground(width: float, segment_width: float = 50.0) -> tuple[GroundSegment, ...]:
    count = math.ceil(width / segment_width + 1)
    return tuple(GroundSegment(x=i * segment_width) for i in range(count))


def standing_player(cfg: GameConfig, ground_y: float) -> Player:
    return Player(
        x=cfg.player_x,
        y=ground_y,
        vy=0.0,
        width=cfg.player_width,
        height=cfg.player_height,
        jumping=False,
        crouching=False,
    )


def new_run(width: float, height: float, cfg: GameConfig) -> GameState:
    ground_y = ground_line(height)
    return GameState(
        width=width,
        height=height,
        ground_y=ground_y,
        player=standing_player(cfg, ground_y),
        score=0,
        level=1,
        speed=cfg.base_speed,
        frame_count=0,
        obstacles=(),
        clouds=(),
        stars=(),
        particles=(),
        ground=build_ground(width, cfg.ground_segment_width),
        last_obstacle_x=None,
        level_up=None,
    )


def resize(state: GameState, width: float, height: float, cfg: GameConfig) -> GameState:
    ground_y = ground_line(height)
    p = state.player
    # A grounded player follows the ground line; an airborne one must not end up below it.
    y = min(p.y, ground_y) if p.jumping else ground_y
    return replace(
        state,
        width=width,
        height=height,
        ground_y=ground_y,
        player=replace(p, y=y),
        ground=build_ground(width, cfg.ground_segment_width),
    )


class World:
    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self.config = config
        self.rng = rng

    def step(self, state: GameState, inp: InputState) -> GameState:
        """Advance the run by one frame.

        Raises PlayerDied carrying the advanced state when the player hits an
        obstacle on this frame.
        """
        cfg = self.config
        frame_count = state.frame_count + 1

        # ----- Progression -----
        prog = advance(state.score, state.level, frame_count, cfg)
        speed = prog.speed
        particles = state.particles
        level_up = state.level_up
        if prog.leveled_up:
            logger.info("Level %d reached at score %d (speed %.2f)", prog.level, prog.score, speed)
            level_up = LevelUpOverlay(level=prog.level, frame=0, duration=cfg.level_up_duration)
            particles = particles + celebration(
                state.width / 2,
                state.height / 2,
                cfg.celebration_color,
                self.rng,
                count=cfg.celebration_particles,
            )

        # ----- Player -----
        player, fx = self._move_player(state.player, inp, state.ground_y)
        particles = particles + fx

        # ----- Spawn -----
        spawned = spawn(replace(state, frame_count=frame_count), prog.level, speed, cfg, self.rng)

        # ----- Advance + cull -----
        obstacles = tuple(o for o in (advance_obstacle(o, speed) for o in spawned.obstacles) if o.right >= 0)
        clouds = tuple(d for d in (advance_decoration(d, speed) for d in spawned.clouds) if d.x + d.width >= 0)
        stars = tuple(d for d in (advance_decoration(d, speed) for d in spawned.stars) if d.x + d.width >= 0)
        particles = tuple(p for p in (advance_particle(p) for p in particles) if p.alive)

        if level_up is not None:
            level_up = replace(level_up, frame=level_up.frame + 1)
            if level_up.finished:
                level_up = None

        # Spacing reference follows the rightmost survivor
        last_obstacle_x = max(o.x for o in obstacles) if obstacles else None

        # ----- Hazard collision -----
        hit = first_collision(player, obstacles, state.ground_y)

        # ----- Ground scroll -----
        ground = self._scroll_ground(state.ground, speed, state.width)

        new_state = GameState(
            width=state.width,
            height=state.height,
            ground_y=state.ground_y,
            player=player,
            score=prog.score,
            level=prog.level,
            speed=speed,
            frame_count=frame_count,
            obstacles=obstacles,
            clouds=clouds,
            stars=stars,
            particles=particles,
            ground=ground,
            last_obstacle_x=last_obstacle_x,
            level_up=level_up,
        )
        if hit is not None:
            logger.debug("Collision with %s at x=%.1f", hit.kind.value, hit.x)
            raise PlayerDied(new_state)
        return new_state

    def _move_player(self, p: Player, inp: InputState, ground_y: float) -> tuple[Player, tuple[Particle, ...]]:
        cfg = self.config
        fx: tuple[Particle, ...] = ()

        # ----- Crouch release -----
        if p.crouching and not inp.crouch_held:
            p = replace(p, crouching=False, height=cfg.player_height, y=ground_y)

        # ----- Jump (ignored while airborne or crouched) -----
        if inp.jump_pressed and not p.jumping and not p.crouching:
            p = replace(p, vy=cfg.jump_velocity, jumping=True)
            fx = fx + burst(p.x + 20, ground_y, cfg.jump_color, self.rng, count=cfg.particles_per_burst)

        # ----- Crouch (ground only) -----
        if inp.crouch_held and not p.jumping and not p.crouching:
            p = replace(p, crouching=True, height=cfg.crouch_height, y=ground_y)

        # ----- Integrate -----
        if p.jumping:
            vy = p.vy + cfg.gravity
            y = p.y + vy
            if y >= ground_y:
                p = replace(p, y=ground_y, vy=0.0, jumping=False)
                fx = fx + burst(p.x + 35, ground_y, cfg.land_color, self.rng, count=cfg.particles_per_burst)
            else:
                p = replace(p, y=y, vy=vy)

        return p, fx

    def _scroll_ground(
        self, ground: tuple[GroundSegment, ...], speed: float, width: float
    ) -> tuple[GroundSegment, ...]:
        seg_w = self.config.ground_segment_width
        if not ground:
            ground = build_ground(width, seg_w)

        out: list[GroundSegment] = []
        for seg in ground:
            x = seg.x - speed
            if x + seg_w < 0:
                x = width
            out.append(GroundSegment(x=x))
        return tuple(out)
