"""Tests for the DELETE builder."""

from sqlchain.builder import Delete, delete


class TestDeleteBuilder:
    """Test cases for Delete."""

    def test_basic_delete(self) -> None:
        """Test DELETE without conditions."""
        assert delete("users").build() == "DELETE FROM users;"

    def test_delete_with_conditions(self) -> None:
        """Test conditions are ANDed in call order."""
        query = delete("users").filter("name = $1").filter("karma <= $2").build()

        assert query == "DELETE FROM users WHERE name = $1 AND karma <= $2;"

    def test_filter_returns_same_builder(self) -> None:
        builder = delete("users")
        assert builder.filter("id = 1") is builder

    def test_factory_matches_constructor(self) -> None:
        assert delete("users") == Delete("users")

    def test_fragments_pass_through_verbatim(self) -> None:
        """Test fragments are not parsed or escaped."""
        query = delete("audit log").filter("created_at < now() - interval '30 days'").build()

        assert query == "DELETE FROM audit log WHERE created_at < now() - interval '30 days';"

    def test_str_renders_query(self) -> None:
        builder = delete("users").filter("id = 1")
        assert str(builder) == builder.build() == "DELETE FROM users WHERE id = 1;"

    def test_repr_shows_state(self) -> None:
        builder = delete("users").filter("id = 1")
        assert repr(builder) == "Delete(table='users', conditions=['id = 1'])"
