"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import Sequence

from vimlite.keymaps.resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from vimlite.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .state import PendingOperator

ESCAPE_KEYS = frozenset({"ESC", "<Esc>"})


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(sorted(m.lower() for m in key.modifiers))
        return f"{modifier}+{key.key}"
    return key.key


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def resolve(
    context: ModeContext, mode: str, tokens: Sequence[str]
) -> ResolutionResult:
    return require_keymap_resolver(context).resolve(mode, tuple(tokens))


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


class KeymapMode(Mode):
    """Mode that routes keys through the resolver before any fallback.

    Two-key forms keep their first key in ``SessionState.pending``. When the
    second key does not complete a binding the pending key is dropped and the
    second key is dispatched again on its own.
    """

    accepts_count = False

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger(f"vimlite.modes.{self.name}")

    def handle_key(self, key: KeyInput) -> ModeResult:
        session = self.context.session
        if self._is_count_digit(key):
            session.push_digit(key.key)
            return ModeResult(consumed=True, status="count")

        token = key_to_token(key)
        pending = session.pending
        tokens = (pending.value, token) if pending is not None else (token,)
        result = resolve(self.context, self.name, tokens)

        if result.status == "match" and result.match:
            session.pending = None
            outcome = execute_match(self.context, result.match)
            if session.pending is None:
                session.count = ""
            self.after_action(outcome)
            return outcome

        if result.status == "pending" and pending is None:
            try:
                session.pending = PendingOperator(token)
            except ValueError:
                # Only the enumerated operators may start a two-key form.
                self.logger.debug(f"ignoring prefix binding on '{token}'")
            else:
                return ModeResult(
                    consumed=True, status="pending", message="awaiting_sequence"
                )

        if pending is not None:
            session.reset_keys()
            return self.handle_key(key)

        session.count = ""
        return self.handle_unbound(key)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss", message="unhandled")

    def after_action(self, result: ModeResult) -> None:
        del result

    def _is_count_digit(self, key: KeyInput) -> bool:
        session = self.context.session
        if not self.accepts_count or session.pending is not None or key.modifiers:
            return False
        if not key.key.isdigit() or len(key.key) != 1:
            return False
        return key.key != "0" or bool(session.count)


__all__ = [
    "ESCAPE_KEYS",
    "KeymapMode",
    "execute_match",
    "key_to_token",
    "require_keymap_resolver",
    "resolve",
]
