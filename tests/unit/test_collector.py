"""Unit tests for accessor collection."""

from __future__ import annotations

from persist_bind.mapping.collector import CandidateGroup, collect_candidates


class TestCollectCandidates:
    def test_groups_getter_and_setter(self, make_method) -> None:
        getter = make_method("getName", returns=str)
        setter = make_method("setName", str)
        groups = collect_candidates([getter, setter])
        assert groups == {"name": CandidateGroup("name", (getter,), (setter,))}

    def test_is_prefix_is_getter_candidate(self, make_method) -> None:
        getter = make_method("isActive", returns=bool)
        groups = collect_candidates([getter])
        assert groups["active"].getters == (getter,)
        assert groups["active"].setters == ()

    def test_keeps_every_candidate(self, make_method) -> None:
        methods = [
            make_method("getValue", returns=int),
            make_method("isValue", returns=bool),
            make_method("setValue", int),
            make_method("setValue", str),
        ]
        group = collect_candidates(methods)["value"]
        assert len(group.getters) == 2
        assert len(group.setters) == 2

    def test_preserves_declaration_order(self, make_method) -> None:
        first = make_method("setValue", int)
        second = make_method("setValue", str)
        group = collect_candidates([first, second])["value"]
        assert group.setters == (first, second)

    def test_skips_non_accessors(self, make_method) -> None:
        groups = collect_candidates([make_method("toString", returns=str), make_method("a")])
        assert groups == {}

    def test_setter_only_field_still_collected(self, make_method) -> None:
        groups = collect_candidates([make_method("setOnly", int)])
        assert groups["only"].getters == ()

    def test_snake_and_camel_share_a_group(self, make_method) -> None:
        camel = make_method("setValue", int)
        snake = make_method("set_value", str)
        group = collect_candidates([camel, snake])["value"]
        assert group.setters == (camel, snake)

    def test_snake_case_disabled(self, make_method) -> None:
        groups = collect_candidates([make_method("set_value", str)], snake_case=False)
        assert list(groups) == ["_value"]
