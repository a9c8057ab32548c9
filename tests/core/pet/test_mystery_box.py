"""미스터리 박스 테스트: 티어 판정, 결과 추첨, 재현성"""

import random
from unittest.mock import MagicMock

import pytest

from src.core.pet.models import HealthState, Mood
from src.core.pet.mystery import (
    COMMON_BOX_OUTCOMES,
    RARE_BOX_OUTCOMES,
    BoxTier,
    MysteryBox,
    MysteryBoxSystem,
)
from src.core.pet.pet import Pet

COMMON_DESCRIPTIONS = [
    "Found a small snack! (-5 hunger)",
    "Discovered a minor toy! (+5 social)",
    "Got a bit dirty... (-5 hygiene)",
    "Took a little extra energy (-5 sleep)",
    "Small treat! (-3 hunger, +3 social)",
]

RARE_DESCRIPTIONS = [
    "Found a healthy meal! (-10 hunger)",
    "Found a fun puzzle! (+10 social, -5 sleep)",
    "Discovered a shower kit! (+10 hygiene)",
    "Found a comfy pillow! (+10 sleep)",
    "Oh no! Box contained a stinky surprise! (-10 hygiene, +5 social)",
]


# ── 박스 속성 ───────────────────────────────────────────


class TestBoxProperties:
    def test_common_box(self) -> None:
        box = MysteryBox(BoxTier.COMMON)
        assert box.name == "Common Mystery Box"
        assert box.description == (
            "A common mystery box. Contains minor helpful (or sometimes harmful) surprises."
        )
        assert [o.description for o in box.outcomes] == COMMON_DESCRIPTIONS

    def test_rare_box(self) -> None:
        box = MysteryBox(BoxTier.RARE)
        assert box.name == "Uncommon Mystery Box"
        assert box.description == "An uncommon mystery box with more significant effects."
        assert [o.description for o in box.outcomes] == RARE_DESCRIPTIONS

    def test_five_outcomes_per_tier(self) -> None:
        assert len(COMMON_BOX_OUTCOMES) == 5
        assert len(RARE_BOX_OUTCOMES) == 5


# ── 티어 판정 ───────────────────────────────────────────


class TestGenerateRandomBox:
    @pytest.mark.parametrize(
        "roll, tier",
        [(0, BoxTier.COMMON), (59, BoxTier.COMMON), (60, BoxTier.RARE), (99, BoxTier.RARE)],
    )
    def test_tier_split(
        self, roll: int, tier: BoxTier, scripted_rng: MagicMock, box_system: MysteryBoxSystem
    ) -> None:
        scripted_rng.randrange.return_value = roll
        box = box_system.generate_random_box()
        assert box.tier == tier
        scripted_rng.randrange.assert_called_once_with(100)

    def test_box_shares_system_rng(
        self, scripted_rng: MagicMock, box_system: MysteryBoxSystem, pet: Pet
    ) -> None:
        scripted_rng.randrange.side_effect = [10, 4]
        box = box_system.generate_random_box()
        assert box.open(pet) == "Small treat! (-3 hunger, +3 social)"
        scripted_rng.randrange.assert_called_with(5)

    def test_seeded_systems_repeat(self) -> None:
        """같은 시드 → 같은 박스·결과 순서."""

        def run(seed: int) -> list:
            system = MysteryBoxSystem(random.Random(seed))
            pet = Pet.create()
            results = []
            for _ in range(20):
                box = system.generate_random_box()
                results.append((box.tier, box.open(pet)))
            results.append(pet.health)
            return results

        assert run(7) == run(7)

    def test_both_tiers_appear(self, seeded_rng: random.Random) -> None:
        system = MysteryBoxSystem(seeded_rng)
        tiers = {system.generate_random_box().tier for _ in range(200)}
        assert tiers == {BoxTier.COMMON, BoxTier.RARE}


# ── 개봉 효과 ───────────────────────────────────────────


class TestOpen:
    @pytest.mark.parametrize(
        "index, expected",
        [
            (0, HealthState(45, 50, 50, 50)),  # snack
            (1, HealthState(50, 50, 55, 50)),  # toy
            (2, HealthState(50, 45, 50, 50)),  # dirty
            (3, HealthState(50, 50, 50, 45)),  # tired
            (4, HealthState(47, 50, 53, 50)),  # small treat
        ],
    )
    def test_common_outcome_changes_named_axes(
        self, index: int, expected: HealthState, scripted_rng: MagicMock
    ) -> None:
        """(50, 50, 50, 50)에서 문구에 적힌 축만 적힌 만큼 변한다."""
        scripted_rng.randrange.return_value = index
        pet = Pet.create()
        result = MysteryBox(BoxTier.COMMON, scripted_rng).open(pet)

        assert result == COMMON_DESCRIPTIONS[index]
        assert pet.health == expected

    @pytest.mark.parametrize(
        "index, expected",
        [
            (0, HealthState(40, 50, 50, 50)),  # meal
            (1, HealthState(50, 50, 60, 45)),  # puzzle
            (2, HealthState(50, 60, 50, 50)),  # shower kit
            (3, HealthState(50, 50, 50, 60)),  # pillow
            (4, HealthState(50, 40, 55, 50)),  # stinky surprise
        ],
    )
    def test_rare_outcome_changes_named_axes(
        self, index: int, expected: HealthState, scripted_rng: MagicMock
    ) -> None:
        scripted_rng.randrange.return_value = index
        pet = Pet.create()
        result = MysteryBox(BoxTier.RARE, scripted_rng).open(pet)

        assert result == RARE_DESCRIPTIONS[index]
        assert pet.health == expected

    def test_open_clamps(self, scripted_rng: MagicMock) -> None:
        scripted_rng.randrange.return_value = 0
        pet = Pet.create()
        pet.apply_health_impact(hunger=-48)
        MysteryBox(BoxTier.RARE, scripted_rng).open(pet)
        assert pet.health.hunger == 0

    def test_open_does_not_recompute_mood(self, scripted_rng: MagicMock) -> None:
        scripted_rng.randrange.return_value = 4
        pet = Pet.create()
        pet.apply_health_impact(hygiene=-15)  # 35
        MysteryBox(BoxTier.RARE, scripted_rng).open(pet)  # 25
        assert pet.mood == Mood.NEUTRAL
        pet.update_mood()
        assert pet.mood == Mood.SAD

    def test_unseeded_open_returns_known_description(self, pet: Pet) -> None:
        result = MysteryBox(BoxTier.COMMON).open(pet)
        assert result in COMMON_DESCRIPTIONS
        assert pet.health != HealthState()
