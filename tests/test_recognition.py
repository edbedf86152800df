"""
Tests for sign classifiers and the recognition dispatcher.
"""

import pytest

from sign_practice.recognition import GestureResult, Sign, recognize, supported_signs
from sign_practice.recognition.dispatcher import CLASSIFIERS


FIST = {'index': 'curled', 'middle': 'curled', 'ring': 'curled', 'pinky': 'curled'}


class TestSign:

    def test_from_label(self):
        assert Sign.from_label("I Love You") is Sign.I_LOVE_YOU
        assert Sign.from_label(Sign.HELP) is Sign.HELP

    @pytest.mark.parametrize("label", ["", "stop", "Thank You", None, 3])
    def test_unknown_label(self, label):
        assert Sign.from_label(label) is None

    def test_every_sign_has_a_classifier(self):
        assert set(CLASSIFIERS) == set(Sign)

    def test_supported_signs(self):
        assert supported_signs() == ["I Love You", "Stop", "More", "Help"]


class TestILoveYou:

    def test_match(self, ily_hand):
        result = recognize("I Love You", [ily_hand])
        assert result == GestureResult("I Love You", 1.0)

    def test_four_of_five_checks_is_not_enough(self, hand_factory):
        hand = hand_factory(fingers={'middle': 'curled'})
        assert recognize("I Love You", [hand]) is None

    def test_any_hand_may_match(self, open_hand, ily_hand):
        result = recognize(Sign.I_LOVE_YOU, [open_hand, ily_hand])
        assert result is not None
        assert result.label == "I Love You"

    def test_empty_keypoints_do_not_raise(self):
        result = recognize("I Love You", [{'keypoints': []}])
        assert result is None or isinstance(result, GestureResult)


class TestStop:

    def test_open_palm(self, open_hand):
        assert recognize("Stop", [open_hand]) == GestureResult("Stop", 1.0)

    def test_three_fingers_is_not_enough(self, hand_factory):
        hand = hand_factory(fingers={'pinky': 'curled'})
        assert recognize("Stop", [hand]) is None

    def test_only_first_hand_counts(self, fist_hand, open_hand):
        assert recognize("Stop", [fist_hand, open_hand]) is None


class TestMore:

    def test_two_o_shapes_together(self, hand_factory):
        left = hand_factory(wrist=(300.0, 300.0), fingers=FIST, pinch=True)
        right = hand_factory(wrist=(380.0, 300.0), fingers=FIST, pinch=True)

        assert recognize("More", [left, right]) == GestureResult("More", 0.9)

    def test_hands_too_far_apart(self, hand_factory):
        left = hand_factory(wrist=(100.0, 300.0), pinch=True)
        right = hand_factory(wrist=(600.0, 300.0), pinch=True)

        assert recognize("More", [left, right]) is None

    def test_both_hands_must_be_o_shapes(self, hand_factory):
        left = hand_factory(wrist=(300.0, 300.0), pinch=True)
        right = hand_factory(wrist=(380.0, 300.0))

        assert recognize("More", [left, right]) is None

    def test_missing_tips_are_not_o_shapes(self, hand_factory):
        left = hand_factory(pinch=True)
        right = hand_factory(wrist=(380.0, 300.0), pinch=True)
        right[8] = None

        assert recognize("More", [left, right]) is None

    def test_needs_two_hands(self, hand_factory):
        assert recognize("More", []) is None
        assert recognize("More", [hand_factory(pinch=True)]) is None


class TestHelp:

    def test_fist_on_palm(self, hand_factory):
        fist = hand_factory(wrist=(300.0, 200.0), fingers=FIST)
        palm = hand_factory(wrist=(300.0, 260.0))

        assert recognize("Help", [fist, palm]) == GestureResult("Help", 0.85)

    def test_roles_are_symmetric(self, hand_factory):
        fist = hand_factory(wrist=(300.0, 200.0), fingers=FIST)
        palm = hand_factory(wrist=(300.0, 260.0))

        assert recognize("Help", [palm, fist]) == GestureResult("Help", 0.85)

    def test_fist_below_palm(self, hand_factory):
        fist = hand_factory(wrist=(300.0, 260.0), fingers=FIST)
        palm = hand_factory(wrist=(300.0, 200.0))

        assert recognize("Help", [fist, palm]) is None

    def test_fist_level_with_palm(self, hand_factory):
        fist = hand_factory(wrist=(300.0, 200.0), fingers=FIST)
        palm = hand_factory(wrist=(360.0, 200.0))

        assert recognize("Help", [fist, palm]) is None
        assert recognize("Help", [palm, fist]) is None

    def test_hands_too_far_apart(self, hand_factory):
        fist = hand_factory(wrist=(300.0, 50.0), fingers=FIST)
        palm = hand_factory(wrist=(300.0, 400.0))

        assert recognize("Help", [fist, palm]) is None

    def test_two_palms(self, hand_factory):
        assert recognize("Help", [hand_factory(wrist=(300.0, 200.0)), hand_factory(wrist=(300.0, 260.0))]) is None


class TestDispatcher:

    @pytest.mark.parametrize("target", ["", "Milk", "stop", None, 42])
    def test_unsupported_target(self, target, open_hand):
        assert recognize(target, [open_hand]) is None

    @pytest.mark.parametrize("hands", [
        None,
        "garbage",
        42,
        [None],
        [{'keypoints': 'abc'}],
        [[{'x': 'a'}, {'y': None}]],
        [{'keypoints': [None] * 21}, {}],
        [[{'x': float('inf'), 'y': float('nan')}] * 21],
        [[{'x': 10 ** 400, 'y': 1}] * 21, [(float('-inf'), 10 ** 400)] * 21],
        [[(1e308, -1e308)] * 21, [(0.0, 1e308)] * 21],
    ])
    @pytest.mark.parametrize("target", ["I Love You", "Stop", "More", "Help"])
    def test_malformed_frames_never_raise(self, target, hands):
        result = recognize(target, hands)
        assert result is None or 0.0 <= result.confidence <= 1.0

    def test_result_to_dict(self, open_hand):
        assert recognize("Stop", [open_hand]).to_dict() == {'label': "Stop", 'confidence': 1.0}
