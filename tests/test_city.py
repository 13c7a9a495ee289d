"""ButterflyCity facade tests"""

import threading

import pytest

from src.core.city import DEMO_CAST, ButterflyCity, seed_demo_villagers
from src.core.event_log import EventLog
from src.core.nudge.models import NudgeError, NudgeKind
from src.core.villager.enums import ConsequenceType, Mood, RelationshipType, Trait
from src.core.villager.registry import VillagerNotFoundError
from tests.helpers import FIRST_WINS, FixedRandom


class TestCreateVillager:
    def test_create_logs_game_event(self, city: ButterflyCity):
        alice = city.create_villager("Alice", [Trait.FRIENDLY], Mood.HAPPY)
        events = city.get_events_by_type("game")
        assert len(events) == 1
        assert events[0].description == "Alice joins Butterfly City!"
        assert events[0].metadata["villager_id"] == alice.villager_id

    def test_villagers_are_lined_up(self, city: ButterflyCity):
        first = city.create_villager("A")
        second = city.create_villager("B")
        assert (first.position.x, first.position.y) == (0, 100)
        assert (second.position.x, second.position.y) == (100, 100)

    def test_lookup(self, city: ButterflyCity):
        alice = city.create_villager("Alice")
        assert city.get_villager(alice.villager_id) is alice
        assert city.find_villager("Alice") is alice
        assert city.find_villager("Zed") is None
        assert city.villagers == [alice]

    def test_unknown_villager(self, city: ButterflyCity):
        with pytest.raises(VillagerNotFoundError):
            city.get_villager("missing")


class TestCityNudges:
    def test_run_nudge_by_ids(self, city: ButterflyCity):
        alice = city.create_villager("Alice", [Trait.FRIENDLY])
        eve = city.create_villager("Eve", [Trait.FRIENDLY])

        result = city.run_nudge(NudgeKind.INTRODUCE, [alice.villager_id, eve.villager_id])

        assert [c.type for c in result.consequences] == [ConsequenceType.POSITIVE]
        assert city.relationship_summary(alice.villager_id) == [
            {"name": "Eve", "affinity": 40, "type": "neutral"}
        ]

    def test_unknown_id_leaves_state_untouched(self, city: ButterflyCity):
        alice = city.create_villager("Alice")
        before = len(city.get_all_events())
        with pytest.raises(VillagerNotFoundError):
            city.run_nudge(NudgeKind.INTRODUCE, [alice.villager_id, "ghost"])
        assert len(city.get_all_events()) == before
        assert alice.relationships == {}

    def test_bad_arity(self, city: ButterflyCity):
        alice = city.create_villager("Alice")
        with pytest.raises(NudgeError):
            city.run_nudge(NudgeKind.GOSSIP, [alice.villager_id])

    def test_subscribe_receives_nudge_events(self, city: ButterflyCity):
        received = []
        unsubscribe = city.subscribe(received.append)
        a = city.create_villager("A")
        b = city.create_villager("B")
        city.run_nudge("romance", [a.villager_id, b.villager_id])
        unsubscribe()
        city.run_nudge("romance", [a.villager_id, b.villager_id])

        assert [e.event_type for e in received] == ["game", "game", "nudge"]

    def test_shared_event_log(self):
        log = EventLog(max_events=5)
        city = ButterflyCity(event_log=log)
        assert city.event_log is log
        assert city.nudge_system.event_log is log

    def test_max_events(self):
        city = ButterflyCity(max_events=3)
        for name in "ABCDE":
            city.create_villager(name)
        assert len(city.get_all_events()) == 3
        assert city.get_recent_events(1)[0].description == "E joins Butterfly City!"

    def test_concurrent_nudges_keep_affinity_consistent(self):
        city = ButterflyCity(rng=FixedRandom(FIRST_WINS))
        host = city.create_villager("Host")
        a = city.create_villager("A")
        b = city.create_villager("B")
        a.set_relationship(b, -100)
        b.set_relationship(a, -100)
        ids = [host.villager_id, a.villager_id, b.villager_id]

        def worker():
            for _ in range(10):
                city.run_nudge(NudgeKind.GROUP_EVENT, ids)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # 40 reunions at +5 each, from -100 → clamped at +100
        assert a.get_relationship(b).affinity == 100
        assert b.get_relationship(a).type == RelationshipType.FRIEND


class TestDemoCast:
    def test_seed_demo_villagers(self, city: ButterflyCity):
        villagers = seed_demo_villagers(city)
        assert [v.name for v in villagers] == [name for name, _, _ in DEMO_CAST]
        assert city.find_villager("Carol").has_trait(Trait.ROMANTIC)
        assert len(city.get_events_by_type("game")) == 5

    def test_demo_storyline(self, city: ButterflyCity):
        """Walk through the demo sequence of nudges."""
        alice, bob, carol, dave, eve = seed_demo_villagers(city)

        def ids(*villagers):
            return [v.villager_id for v in villagers]

        # Alice (friendly, artistic) meets Bob (shy, bookish): 15 - 10 = 5
        city.run_nudge("introduce", ids(alice, bob))
        assert alice.get_relationship(bob).affinity == 5

        # Carol (romantic, gossip) meets Dave (competitive, athletic): 0
        city.run_nudge("introduce", ids(carol, dave))
        assert carol.get_relationship(dave).affinity == 0

        # Carol has no link to Alice; Alice's opinion of Bob drops by 22.5
        city.run_nudge("gossip", ids(carol, alice, bob))
        assert alice.get_relationship(bob).affinity == -17.5

        # Carol → Dave at 0: the gesture backfires
        result = city.run_nudge("romance", ids(carol, dave))
        assert carol.mood == Mood.SAD
        assert dave.mood == Mood.ANGRY
        assert result.consequences[0].type == ConsequenceType.CHAOS

        # Eve (peacemaker, friendly) meets Alice: 15 + 15 + 10 = 40
        city.run_nudge("introduce", ids(eve, alice))
        assert eve.get_relationship(alice).affinity == 40
        assert eve.mood == Mood.HAPPY

        # Eve gossips to Carol about Dave; Carol is no peacemaker
        result = city.run_nudge("gossip", ids(eve, carol, dave))
        assert [c.type for c in result.consequences] == [ConsequenceType.NEGATIVE]
        assert carol.get_relationship(dave).affinity == -25
