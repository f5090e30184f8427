"""Tests for lib/resolver.py - extends chains and effective settings."""

from aws_login.lib.errors import CyclicExtendsError, UnknownTemplateError
from aws_login.lib.resolver import ancestry, enabled_names, resolve
from aws_login.lib.result import Err, Ok, unwrap
from aws_login.models import Template, TemplateCollection


def collection(*templates: Template) -> TemplateCollection:
    return {t.name: t for t in templates}


class TestAncestry:
    """Tests for the extends walk."""

    def test_single_template(self) -> None:
        coll = collection(Template("a", {"x": "1"}))
        assert [t.name for t in unwrap(ancestry(coll, "a"))] == ["a"]

    def test_chain_is_most_derived_first(self) -> None:
        coll = collection(
            Template("c", {}),
            Template("b", {}, extends="c"),
            Template("a", {}, extends="b"),
        )
        assert [t.name for t in unwrap(ancestry(coll, "a"))] == ["a", "b", "c"]

    def test_unknown_name(self) -> None:
        assert ancestry({}, "missing") == Err(UnknownTemplateError("missing"))

    def test_dangling_extends_names_referrer(self) -> None:
        coll = collection(Template("dev", {}, extends="ghost"))
        assert ancestry(coll, "dev") == Err(UnknownTemplateError("ghost", referenced_by="dev"))

    def test_self_reference_is_cycle(self) -> None:
        coll = collection(Template("a", {}, extends="a"))
        assert ancestry(coll, "a") == Err(CyclicExtendsError(("a", "a")))

    def test_cycle_reached_through_chain(self) -> None:
        coll = collection(
            Template("x", {}, extends="a"),
            Template("a", {}, extends="b"),
            Template("b", {}, extends="a"),
        )
        assert ancestry(coll, "x") == Err(CyclicExtendsError(("x", "a", "b", "a")))


class TestResolve:
    """Tests for resolve."""

    def test_no_extends_returns_own_settings(self) -> None:
        coll = collection(Template("a", {"region": "eu-west-1", "retries": 3}))
        assert resolve(coll, "a") == Ok({"region": "eu-west-1", "retries": 3})

    def test_most_derived_wins(self) -> None:
        coll = collection(
            Template("c", {"k1": "c", "k2": "c", "k3": "c"}),
            Template("b", {"k2": "b", "k3": "b"}, extends="c"),
            Template("a", {"k3": "a"}, extends="b"),
        )
        assert resolve(coll, "a") == Ok({"k1": "c", "k2": "b", "k3": "a"})

    def test_disabled_ancestor_contributes(self, sample_collection: TemplateCollection) -> None:
        assert resolve(sample_collection, "dev") == Ok({"region": "us-east-1", "role": "ReadOnly"})

    def test_disabled_template_resolves_by_name(
        self, sample_collection: TemplateCollection
    ) -> None:
        assert resolve(sample_collection, "base") == Ok({"region": "us-east-1"})

    def test_empty_settings(self) -> None:
        coll = collection(Template("a", {}, extends="b"), Template("b", {}))
        assert resolve(coll, "a") == Ok({})

    def test_errors_propagate(self) -> None:
        coll = collection(Template("a", {}, extends="a"))
        assert isinstance(resolve(coll, "a"), Err)
        assert resolve(coll, "zzz") == Err(UnknownTemplateError("zzz"))

    def test_does_not_mutate_templates(self, sample_collection: TemplateCollection) -> None:
        settings = unwrap(resolve(sample_collection, "dev"))
        settings["region"] = "changed"

        assert sample_collection["base"].settings == {"region": "us-east-1"}
        assert sample_collection["dev"].settings == {"role": "ReadOnly"}
        assert resolve(sample_collection, "dev") == Ok({"region": "us-east-1", "role": "ReadOnly"})

    def test_deep_chain(self) -> None:
        depth = 5000
        coll = collection(
            Template("t0", {"depth": 0}),
            *(Template(f"t{i}", {}, extends=f"t{i - 1}") for i in range(1, depth)),
        )
        assert resolve(coll, f"t{depth - 1}") == Ok({"depth": 0})


class TestEnabledNames:
    """Tests for enabled_names."""

    def test_only_enabled_sorted(self) -> None:
        coll = collection(
            Template("zeta", {}),
            Template("alpha", {}),
            Template("hidden", {}, enabled=False),
        )
        assert enabled_names(coll) == ["alpha", "zeta"]

    def test_empty(self) -> None:
        assert enabled_names({}) == []
