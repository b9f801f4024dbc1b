"""
Footstep suppression rules for Dynamic Footsteps.

Decides, from a snapshot of input and motion state, whether a step
should attempt a footstep at all. Jump and airborne checks come first so
they win even while the master switch is on.
"""

from dataclasses import dataclass

from state.constants import UNSET_ID


@dataclass(frozen=True)
class SuppressionContext:
    """Input/motion snapshot for one step evaluation."""
    jump_triggered: bool = False
    airborne: bool = False
    master_switch_on: bool = True
    is_normal: bool = True
    is_move_route_forcing: bool = False
    is_event_running: bool = False


def should_attempt(context: SuppressionContext, master_switch_configured: bool) -> bool:
    """Return True if a footstep should be attempted for this step.

    Args:
        context: Snapshot taken at the moment the step completed
        master_switch_configured: True if a master switch id is set

    Returns:
        False if any suppression rule applies
    """
    if context.jump_triggered:
        return False
    if context.airborne:
        return False
    if master_switch_configured and not context.master_switch_on:
        return False
    return (context.is_normal
            and not context.is_move_route_forcing
            and not context.is_event_running)


def build_context(character, motion, game_state, jump_symbol: str,
                  master_switch_id: int) -> SuppressionContext:
    """Take a suppression snapshot from the live collaborators.

    Args:
        character: Character that stepped
        motion: MotionState for input/airborne queries
        game_state: GameState for switches and event status
        jump_symbol: Input symbol for jumping; empty skips the jump check
        master_switch_id: Master switch id, 0 if unused

    Returns:
        SuppressionContext for should_attempt()
    """
    jump_triggered = bool(jump_symbol) and motion.is_jump_triggered(jump_symbol)
    master_switch_on = True
    if master_switch_id != UNSET_ID:
        master_switch_on = game_state.switches.value(master_switch_id)

    return SuppressionContext(
        jump_triggered=jump_triggered,
        airborne=motion.is_airborne(character),
        master_switch_on=master_switch_on,
        is_normal=character.is_normal(),
        is_move_route_forcing=character.is_move_route_forcing(),
        is_event_running=game_state.is_event_running(),
    )
