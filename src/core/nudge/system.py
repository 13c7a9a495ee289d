"""NudgeSystem - rule engine for player interventions

Each nudge reads the current traits / moods / relationships of the villagers
involved, mutates them in place, records the notable steps in the EventLog
and returns the consequences in the order they happened.

Relationship records are directed. The rules below write both directions
explicitly wherever both are meant to change; a few branches intentionally
touch only one side.
"""

import random
from typing import Callable, Dict, List, Optional, Sequence

from src.core.event_log import EventLog
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.nudge import calculations as calc
from src.core.nudge.models import NudgeError, NudgeKind, NudgeResult
from src.core.villager.enums import ConsequenceType, Mood, RelationshipType, Trait
from src.core.villager.models import Consequence, Villager

logger = get_logger(__name__)


class NudgeSystem:
    """Resolves nudges against villager state.

    Args:
        event_log: story log receiving "nudge" / "consequence" entries
        rng: random source for competitions (inject a seeded one in tests)
    """

    def __init__(
        self,
        event_log: Optional[EventLog] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.event_log = event_log if event_log is not None else EventLog()
        self._rng = rng if rng is not None else random.Random()

    # ── dispatch ─────────────────────────────────────────────

    def run_nudge(
        self,
        kind: NudgeKind,
        villagers: Sequence[Villager],
        event_kind: str = "party",
    ) -> NudgeResult:
        """Run a nudge by kind.

        introduce / romance / competition take two villagers, gossip takes
        three (gossiper, listener, subject), group_event takes a host plus at
        least one attendee.
        """
        try:
            kind = NudgeKind(kind)
        except ValueError:
            raise NudgeError(f"Unknown nudge kind: {kind}") from None

        if kind == NudgeKind.GROUP_EVENT:
            if len(villagers) < 2:
                raise NudgeError(
                    f"{kind.value} needs a host and at least one attendee, "
                    f"got {len(villagers)} villager(s)"
                )
            return self.organize_group_event(
                villagers[0], list(villagers[1:]), event_kind
            )

        handlers: Dict[NudgeKind, Callable[..., NudgeResult]] = {
            NudgeKind.INTRODUCE: self.introduce_villagers,
            NudgeKind.GOSSIP: self.share_gossip,
            NudgeKind.ROMANCE: self.encourage_romance,
            NudgeKind.COMPETITION: self.start_competition,
        }
        expected = 3 if kind == NudgeKind.GOSSIP else 2
        if len(villagers) != expected:
            raise NudgeError(
                f"{kind.value} needs {expected} villagers, got {len(villagers)}"
            )
        return handlers[kind](*villagers)

    # ── introduce ────────────────────────────────────────────

    def introduce_villagers(self, first: Villager, second: Villager) -> NudgeResult:
        self.event_log.log(
            EventTypes.NUDGE,
            f"You introduce {first.name} to {second.name}",
            {"villager1": first.name, "villager2": second.name},
        )
        result = NudgeResult()

        if first.get_relationship(second) is not None:
            result.consequences.append(
                Consequence(
                    ConsequenceType.NEUTRAL,
                    f"{first.name} and {second.name} already know each other",
                )
            )
            return result

        affinity = calc.compute_initial_affinity(first, second)
        first.set_relationship(second, affinity, RelationshipType.NEUTRAL)
        second.set_relationship(first, affinity, RelationshipType.NEUTRAL)
        logger.debug(f"introduce: {first.name} <-> {second.name} affinity={affinity}")

        if affinity > calc.HIT_IT_OFF_THRESHOLD:
            first.set_mood(Mood.HAPPY)
            second.set_mood(Mood.HAPPY)
            result.consequences.append(
                Consequence(
                    ConsequenceType.POSITIVE,
                    f"{first.name} and {second.name} hit it off! "
                    f"(Affinity: {affinity})",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{first.name} and {second.name} became friends!",
            )
        elif affinity < calc.AWKWARD_THRESHOLD:
            result.consequences.append(
                Consequence(
                    ConsequenceType.NEGATIVE,
                    f"{first.name} and {second.name} don't seem to click "
                    f"(Affinity: {affinity})",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{first.name} and {second.name} feel awkward around each other",
            )
        else:
            result.consequences.append(
                Consequence(
                    ConsequenceType.NEUTRAL,
                    f"{first.name} and {second.name} meet (Affinity: {affinity})",
                )
            )

        # only the romantic side falls in love; second's record stays as is
        if (
            first.has_trait(Trait.ROMANTIC)
            and affinity > calc.ROMANTIC_SPARK_THRESHOLD
        ):
            first.set_mood(Mood.LOVE_STRUCK)
            first.modify_affinity(second, calc.ROMANTIC_SPARK_BOOST)
            first.get_relationship(second).type = RelationshipType.ROMANCE
            result.consequences.append(
                Consequence(
                    ConsequenceType.ROMANCE,
                    f"{first.name} is smitten with {second.name}!",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{first.name} develops romantic feelings!",
                {"target": second.name},
            )

        return result

    # ── gossip ───────────────────────────────────────────────

    def share_gossip(
        self, gossiper: Villager, listener: Villager, subject: Villager
    ) -> NudgeResult:
        self.event_log.log(
            EventTypes.NUDGE,
            f"You nudge {gossiper.name} to gossip with {listener.name} "
            f"about {subject.name}",
            {
                "gossiper": gossiper.name,
                "listener": listener.name,
                "subject": subject.name,
            },
        )
        result = NudgeResult()
        multiplier = calc.gossip_multiplier(gossiper)

        if gossiper.get_relationship(listener) is not None:
            gossiper.modify_affinity(listener, calc.GOSSIP_BOND * multiplier)
            listener.modify_affinity(gossiper, calc.GOSSIP_BOND * multiplier)
            result.consequences.append(
                Consequence(
                    ConsequenceType.POSITIVE,
                    f"{gossiper.name} and {listener.name} bond over gossip",
                )
            )

        opinion = listener.get_relationship(subject)
        if opinion is not None:
            listener.modify_affinity(subject, calc.GOSSIP_DAMAGE * multiplier)
            result.consequences.append(
                Consequence(
                    ConsequenceType.NEGATIVE,
                    f"{listener.name}'s opinion of {subject.name} decreases",
                )
            )
            if opinion.affinity < calc.GOSSIP_RIVALRY_THRESHOLD:
                opinion.type = RelationshipType.RIVAL
                listener.set_mood(Mood.ANGRY)
                result.consequences.append(
                    Consequence(
                        ConsequenceType.RIVALRY,
                        f"{listener.name} and {subject.name} are now rivals!",
                    )
                )
                self.event_log.log(
                    EventTypes.CONSEQUENCE,
                    f"A rivalry forms between {listener.name} and {subject.name}!",
                )

        if listener.has_trait(Trait.PEACEMAKER):
            gossiper.modify_affinity(listener, calc.PEACEMAKER_DISAPPROVAL)
            listener.set_mood(Mood.SAD)
            result.consequences.append(
                Consequence(
                    ConsequenceType.CHAOS,
                    f"{listener.name} (a peacemaker) is disappointed in "
                    f"{gossiper.name} for gossiping!",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{listener.name} disapproves of gossip",
            )

        return result

    # ── romance ──────────────────────────────────────────────

    def encourage_romance(self, admirer: Villager, target: Villager) -> NudgeResult:
        self.event_log.log(
            EventTypes.NUDGE,
            f"You encourage {admirer.name} to make a romantic gesture "
            f"toward {target.name}",
            {"admirer": admirer.name, "target": target.name},
        )
        result = NudgeResult()
        relationship = admirer.get_relationship(target)

        if relationship is None:
            result.consequences.append(
                Consequence(
                    ConsequenceType.CHAOS,
                    f"{admirer.name} and {target.name} barely know each other! "
                    f"This is awkward!",
                )
            )
            admirer.set_mood(Mood.ANXIOUS)
            return result

        affinity = relationship.affinity

        if affinity > calc.ROMANCE_SUCCESS_THRESHOLD:
            admirer.modify_affinity(target, calc.ROMANCE_SUCCESS_ADMIRER)
            target.modify_affinity(admirer, calc.ROMANCE_SUCCESS_TARGET)
            admirer.set_mood(Mood.LOVE_STRUCK)
            target.set_mood(Mood.LOVE_STRUCK)
            relationship.type = RelationshipType.ROMANCE
            target_side = target.get_relationship(admirer)
            if target_side is not None:
                target_side.type = RelationshipType.ROMANCE
            result.consequences.append(
                Consequence(
                    ConsequenceType.ROMANCE,
                    f"{admirer.name} and {target.name} start a romance!",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"Romance blooms between {admirer.name} and {target.name}!",
            )
        elif affinity > 0:
            admirer.modify_affinity(target, calc.ROMANCE_DECLINED_ADMIRER)
            target.modify_affinity(admirer, calc.ROMANCE_DECLINED_TARGET)
            admirer.set_mood(Mood.ANXIOUS)
            target.set_mood(Mood.NEUTRAL)
            result.consequences.append(
                Consequence(
                    ConsequenceType.CHAOS,
                    f"{target.name} is flattered but not interested. "
                    f"{admirer.name} feels awkward.",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{admirer.name}'s romantic gesture is politely declined",
            )
        else:
            admirer.modify_affinity(target, calc.ROMANCE_BACKFIRE_ADMIRER)
            target.modify_affinity(admirer, calc.ROMANCE_BACKFIRE_TARGET)
            admirer.set_mood(Mood.SAD)
            target.set_mood(Mood.ANGRY)
            result.consequences.append(
                Consequence(
                    ConsequenceType.CHAOS,
                    f"{target.name} rejects {admirer.name}! The atmosphere is tense.",
                )
            )
            self.event_log.log(
                EventTypes.CONSEQUENCE,
                f"{admirer.name}'s romantic gesture backfires spectacularly!",
            )

        self._check_for_jealousy(admirer, target, result.consequences)
        return result

    def _check_for_jealousy(
        self,
        admirer: Villager,
        target: Villager,
        consequences: List[Consequence],
    ) -> None:
        """Extension point for jealousy among third parties. Currently a no-op."""
        # TODO: needs a registry-wide scan for villagers in romance with admirer or target

    # ── competition ──────────────────────────────────────────

    def start_competition(self, first: Villager, second: Villager) -> NudgeResult:
        self.event_log.log(
            EventTypes.NUDGE,
            f"You set up a friendly competition between {first.name} "
            f"and {second.name}",
            {"villager1": first.name, "villager2": second.name},
        )
        result = NudgeResult()

        existing = first.get_relationship(second)
        affinity_before = existing.affinity if existing is not None else None

        winner = first if self._rng.random() > 0.5 else second
        loser = second if winner is first else first
        logger.debug(f"competition: {winner.name} beats {loser.name}")

        result.consequences.append(
            Consequence(ConsequenceType.NEUTRAL, f"{winner.name} wins the competition!")
        )

        if loser.has_trait(Trait.COMPETITIVE):
            loser.modify_affinity(winner, calc.SORE_LOSER_PENALTY)
            loser.set_mood(Mood.ANGRY)
            result.consequences.append(
                Consequence(
                    ConsequenceType.RIVALRY,
                    f"{loser.name} (competitive) doesn't take the loss well!",
                )
            )
            if (
                affinity_before is not None
                and affinity_before < calc.COMPETITION_RIVALRY_THRESHOLD
            ):
                result.consequences.append(
                    Consequence(
                        ConsequenceType.RIVALRY,
                        f"{loser.name} and {winner.name} become rivals!",
                    )
                )
                self.event_log.log(
                    EventTypes.CONSEQUENCE, "Competition creates a rivalry!"
                )
        elif loser.has_trait(Trait.FRIENDLY):
            loser.modify_affinity(winner, calc.GOOD_SPORT_BONUS)
            winner.modify_affinity(loser, calc.GOOD_SPORT_BONUS)
            loser.set_mood(Mood.HAPPY)
            winner.set_mood(Mood.HAPPY)
            result.consequences.append(
                Consequence(
                    ConsequenceType.POSITIVE,
                    f"{loser.name} (friendly) is a good sport. "
                    f"Their friendship strengthens!",
                )
            )
        else:
            loser.modify_affinity(winner, calc.PLAIN_LOSS_PENALTY)
            loser.set_mood(Mood.NEUTRAL)

        return result

    # ── group event ──────────────────────────────────────────

    def organize_group_event(
        self,
        host: Villager,
        attendees: Sequence[Villager],
        event_kind: str = "party",
    ) -> NudgeResult:
        """Host gathers attendees; strangers meet, acquaintances grow closer."""
        self.event_log.log(
            EventTypes.NUDGE,
            f"{host.name} organizes a {event_kind} with {len(attendees)} attendees",
            {"host": host.name, "attendees": [a.name for a in attendees]},
        )
        result = NudgeResult()

        host.set_mood(Mood.EXCITED)
        result.consequences.append(
            Consequence(ConsequenceType.POSITIVE, f"{host.name} feels proud of hosting!")
        )

        for i, first in enumerate(attendees):
            for second in attendees[i + 1:]:
                if first.get_relationship(second) is None:
                    first.set_relationship(second, calc.GROUP_MEET_AFFINITY)
                    second.set_relationship(first, calc.GROUP_MEET_AFFINITY)
                    result.consequences.append(
                        Consequence(
                            ConsequenceType.POSITIVE,
                            f"{first.name} and {second.name} meet at the {event_kind}",
                        )
                    )
                else:
                    first.modify_affinity(second, calc.GROUP_REUNION_BONUS)
                    second.modify_affinity(first, calc.GROUP_REUNION_BONUS)

        if len(attendees) > calc.CROWD_SIZE_LIMIT:
            for attendee in attendees:
                if attendee.has_trait(Trait.SHY):
                    attendee.set_mood(Mood.ANXIOUS)
                    result.consequences.append(
                        Consequence(
                            ConsequenceType.CHAOS,
                            f"{attendee.name} (shy) feels overwhelmed by the crowd!",
                        )
                    )

        return result
