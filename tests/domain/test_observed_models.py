"""Tests for kepler_syssim.domain.observed."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from kepler_syssim.domain.observed import (
    ObsCatalog,
    OneObserverSystemDetectionProbs,
    StarObs,
    TargetObs,
)


class TestOneObserverSystemDetectionProbs:
    def test_for_planets_shapes(self) -> None:
        probs = OneObserverSystemDetectionProbs.for_planets(3)
        assert probs.capacity == 3
        assert probs.detect_prob.shape == (3,)
        assert probs.pairwise_detect_prob.shape == (3, 3)
        assert probs.transit_prob.shape == (3,)
        assert np.all(probs.detect_prob == 1.0)
        assert probs.detectable_subsets == [[]]

    def test_zero_planets(self) -> None:
        assert OneObserverSystemDetectionProbs.for_planets(0).capacity == 0


class TestTargetObs:
    def test_with_capacity_invariant(self) -> None:
        target = TargetObs.with_capacity(2)
        assert len(target.obs) == len(target.sigma) == target.prob_detect.capacity == 2
        assert target.num_planets == 2
        assert target.obs == [None, None]
        assert target.star is None

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            TargetObs.with_capacity(-1)

    def test_default_is_empty(self) -> None:
        target = TargetObs()
        assert target.num_planets == 0
        assert target.prob_detect.capacity == 0


class TestStarObs:
    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StarObs(radius=1.0, mass=1.0, id=-1)


class TestObsCatalog:
    def test_default_catalog_is_empty(self) -> None:
        catalog = ObsCatalog()
        assert len(catalog) == 0
        assert catalog.num_planets() == 0

    def test_default_lists_not_shared(self) -> None:
        a, b = ObsCatalog(), ObsCatalog()
        a.target.append(TargetObs.with_capacity(1))
        assert len(b) == 0
        assert a.num_planets() == 1
