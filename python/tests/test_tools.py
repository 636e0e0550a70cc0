"""
Tests for the NameCraft MCP tools (called directly, without a transport).
"""

import pytest

from namecraft import server_state
from namecraft.naming.errors import InvalidSlotError, InvalidTransitionError, UnknownStyleOrTypeError
from namecraft.tools import convert_name, list_naming_options, navigate, shortcuts, suggest_names


class TestSuggestNames:
    @pytest.mark.asyncio
    async def test_opens_session_with_recommendations(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "total items", context="main.py", output_format="json")

        assert result["screen"] == "initial"
        assert result["predicted_types"][0] == "normal"
        assert result["language"] == "Python"
        assert [r["result"] for r in result["recommendations"]] == ["totalItems"]
        assert result["session_id"] in server_state.sessions

    @pytest.mark.asyncio
    async def test_uses_client_translations(self, namecraft_home, mock_context):
        result = await suggest_names(
            mock_context,
            "用户数量",
            translations=["user count", "user number", "total users"],
            output_format="json",
        )

        assert result["input"] == "用户数量"
        assert [r["result"] for r in result["recommendations"]] == [
            "userCountCount",
            "userNumberCount",
            "total_usersCount",
        ]

    @pytest.mark.asyncio
    async def test_text_output(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "total items", context="main.py")

        assert "1 suggestion for \"total items\"" in result
        assert "totalItems  [smart_0]" in result
        assert "navigate" in result

    @pytest.mark.asyncio
    async def test_untranslated_phrase_is_a_warning(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "用户数量", output_format="json")

        assert result["status"] == "warning"
        assert result["error"] == "AllInvalidError"
        assert result["retryable"] is True
        assert not server_state.sessions

    @pytest.mark.asyncio
    async def test_blank_translations_are_a_warning(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "用户数量", translations=["", "  "])

        assert result.startswith("⚠️")
        assert "translation" in result

    @pytest.mark.asyncio
    async def test_empty_translation_list_means_no_candidates(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "用户数量", translations=[], output_format="json")

        assert result["status"] == "warning"
        assert result["error"] == "NoCandidatesError"
        assert not server_state.sessions

    @pytest.mark.asyncio
    async def test_structured_translation_options(self, namecraft_home, mock_context):
        result = await suggest_names(
            mock_context,
            "项目总数",
            translation_options=[
                {"camelCase": "totalItems", "PascalCase": "TotalItems", "snake_case": "total_items"},
            ],
            context="main.py",
            output_format="json",
        )

        assert [r["result"] for r in result["recommendations"]] == ["totalItems"]

    @pytest.mark.asyncio
    async def test_translations_are_remembered_per_phrase(self, namecraft_home, mock_context):
        first = await suggest_names(
            mock_context, "用户数量", translations=["user count"], output_format="json"
        )
        again = await suggest_names(mock_context, "用户数量", output_format="json")

        assert again["recommendations"] == first["recommendations"]
        assert server_state.translator.cache.hits == 1

    @pytest.mark.asyncio
    async def test_empty_phrase_is_a_warning(self, namecraft_home, mock_context):
        result = await suggest_names(mock_context, "   ", output_format="json")
        assert result["error"] == "EmptyInputError"


class TestNavigate:
    async def _open(self, ctx, phrase="total items"):
        result = await suggest_names(ctx, phrase, context="main.py", output_format="json")
        return result["session_id"]

    @pytest.mark.asyncio
    async def test_select_finishes_session(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        result = await navigate(mock_context, session_id, "select", option_id="smart_0", output_format="json")

        assert result["status"] == "selected"
        assert result["name"] == "totalItems"
        assert result["saved_rule"] is None
        assert result["shortcuts"]["1"] == "camelCase"
        assert session_id not in server_state.sessions

    @pytest.mark.asyncio
    async def test_drill_down(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        menu = await navigate(mock_context, session_id, "more", output_format="json")
        assert menu["screen"] == "category_menu"
        assert menu["categories"] == {
            "basic": 6,
            "scope": 18,
            "purpose": 36,
            "data-type": 78,
            "semantic": 6,
        }

        options = await navigate(mock_context, session_id, "category", category="semantic", output_format="json")
        assert options["screen"] == "category_options"
        assert options["options"][0]["id"] == "count_camelCase"

        back = await navigate(mock_context, session_id, "back")
        assert back.startswith("Categories:")

        await navigate(mock_context, session_id, "category", category="semantic")
        done = await navigate(mock_context, session_id, "select", option_id="count_snake_case")
        assert done.startswith("✓ Selected total_itemsCount")

    @pytest.mark.asyncio
    async def test_select_with_slot_saves_rule(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)
        await navigate(mock_context, session_id, "more")
        await navigate(mock_context, session_id, "category", category="scope")

        result = await navigate(
            mock_context,
            session_id,
            "select",
            option_id="member_PascalCase",
            slot=2,
            rule_name="members",
            output_format="json",
        )

        assert result["name"] == "M_TotalItems"
        assert result["saved_rule"]["slot"] == 2
        assert result["shortcuts"]["2"] == "members"

        stored = server_state.get_rule_store().read()
        assert stored[2].style.style_id == "PascalCase"
        assert stored[2].type.type_id == "member"
        assert (namecraft_home / "shortcuts.yaml").exists()

    @pytest.mark.asyncio
    async def test_dismiss_discards_session(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        result = await navigate(mock_context, session_id, "dismiss", output_format="json")

        assert result["status"] == "cancelled"
        assert session_id not in server_state.sessions
        assert not (namecraft_home / "shortcuts.yaml").exists()

    @pytest.mark.asyncio
    async def test_bad_slot_leaves_session_open(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        with pytest.raises(InvalidSlotError):
            await navigate(mock_context, session_id, "select", option_id="smart_0", slot=6)

        assert session_id in server_state.sessions

    @pytest.mark.asyncio
    async def test_slot_only_with_select(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        with pytest.raises(ValueError, match="slot is only accepted with select"):
            await navigate(mock_context, session_id, "more", slot=2)

        assert server_state.sessions[session_id].current.screen.value == "initial"

    @pytest.mark.asyncio
    async def test_illegal_transition_raises(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)
        with pytest.raises(InvalidTransitionError):
            await navigate(mock_context, session_id, "back")

    @pytest.mark.asyncio
    async def test_argument_errors(self, namecraft_home, mock_context):
        session_id = await self._open(mock_context)

        with pytest.raises(ValueError, match="option_id is required"):
            await navigate(mock_context, session_id, "select")
        with pytest.raises(ValueError, match="Unknown action"):
            await navigate(mock_context, session_id, "jump")
        with pytest.raises(KeyError):
            await navigate(mock_context, "session_missing", "more")


class TestSessionLimits:
    """Abandoned sessions do not accumulate without bound."""

    @pytest.mark.asyncio
    async def test_oldest_idle_session_is_evicted(self, namecraft_home, mock_context, monkeypatch):
        monkeypatch.setattr(server_state, "MAX_OPEN_SESSIONS", 2)

        ids = []
        for phrase in ("total items", "user name"):
            result = await suggest_names(mock_context, phrase, output_format="json")
            ids.append(result["session_id"])

        # Touching the first session makes the second one the oldest
        await navigate(mock_context, ids[0], "more")
        third = await suggest_names(mock_context, "max retries", output_format="json")

        assert list(server_state.sessions) == [ids[0], third["session_id"]]
        with pytest.raises(KeyError):
            await navigate(mock_context, ids[1], "more")


class TestListNamingOptions:
    @pytest.mark.asyncio
    async def test_json_grid(self, namecraft_home, mock_context):
        result = await list_naming_options(mock_context, "total items", output_format="json")

        assert result["total"] == 144
        assert len(result["categories"]["scope"]) == 18
        assert "const_kebab-case" in result["invalid"]

    @pytest.mark.asyncio
    async def test_style_subset(self, namecraft_home, mock_context):
        result = await list_naming_options(
            mock_context,
            "total items",
            styles=["camelCase", "PascalCase", "snake_case", "_snake_case"],
            output_format="json",
        )
        assert result["total"] == 96

    @pytest.mark.asyncio
    async def test_text_groups_by_category(self, namecraft_home, mock_context):
        result = await list_naming_options(mock_context, "total items", styles=["camelCase"])

        assert result.startswith("24 naming options")
        assert "scope:" in result
        assert "m_totalItems  [member_camelCase]" in result

    @pytest.mark.asyncio
    async def test_toon_output_is_string(self, namecraft_home, mock_context):
        result = await list_naming_options(mock_context, "total items", styles=["camelCase"], output_format="toon")

        assert isinstance(result, str)
        assert "m_totalItems" in result

    @pytest.mark.asyncio
    async def test_unknown_style_raises(self, namecraft_home, mock_context):
        with pytest.raises(UnknownStyleOrTypeError):
            await list_naming_options(mock_context, "total items", styles=["Title Case"])

    @pytest.mark.asyncio
    async def test_empty_phrase_warns(self, namecraft_home, mock_context):
        result = await list_naming_options(mock_context, "?!", output_format="json")
        assert result["status"] == "warning"


class TestConvertName:
    @pytest.mark.asyncio
    async def test_plain_conversion(self, mock_context):
        assert await convert_name(mock_context, "user name", "PascalCase", "member") == "M_UserName"
        assert await convert_name(mock_context, "UserName", "snake_case") == "user_name"

    @pytest.mark.asyncio
    async def test_placeholder_mode(self, mock_context):
        result = await convert_name(
            mock_context, "user name", "camelCase", "member", placeholder_text="int temp = temp + 1;"
        )
        assert result == "int m_userName = m_userName + 1;"

    @pytest.mark.asyncio
    async def test_placeholder_json(self, mock_context):
        result = await convert_name(
            mock_context, "total", placeholder_text="x = 0", output_format="json"
        )
        assert result["name"] == "total"
        assert result["placeholder"] is None
        assert result["replaced_text"] is None

    @pytest.mark.asyncio
    async def test_unknown_type_raises(self, mock_context):
        with pytest.raises(UnknownStyleOrTypeError):
            await convert_name(mock_context, "user name", "camelCase", "vector")

    @pytest.mark.asyncio
    async def test_invalid_result_is_flagged(self, mock_context):
        result = await convert_name(mock_context, "aaaa", output_format="json")
        assert result["valid"] is False


class TestShortcutsTool:
    @pytest.mark.asyncio
    async def test_list_defaults(self, namecraft_home, mock_context):
        result = await shortcuts(mock_context, "list")

        assert "1. camelCase: camelCase / normal (default)" in result
        assert "5. CONSTANT_CASE: CONSTANT_CASE / normal (default)" in result

    @pytest.mark.asyncio
    async def test_save_apply_reset(self, namecraft_home, mock_context):
        saved = await shortcuts(mock_context, "save", slot=3, style="snake_case", type="count", output_format="json")
        assert saved["style"] == "snake_case"

        assert await shortcuts(mock_context, "apply", slot=3, text="user name") == "user_nameCount"

        listing = await shortcuts(mock_context, "list", output_format="json")
        slot3 = listing["slots"][2]
        assert slot3["default"] is False
        assert slot3["name"] == "Counter - underscore"

        await shortcuts(mock_context, "reset", slot=3)
        assert await shortcuts(mock_context, "apply", slot=3, text="user name") == "user_name"

    @pytest.mark.asyncio
    async def test_apply_default_slot(self, namecraft_home, mock_context):
        assert await shortcuts(mock_context, "apply", slot=5, text="max retries") == "MAX_RETRIES"

    @pytest.mark.asyncio
    async def test_argument_errors(self, namecraft_home, mock_context):
        with pytest.raises(ValueError, match="slot is required"):
            await shortcuts(mock_context, "apply", text="x")
        with pytest.raises(ValueError, match="style is required"):
            await shortcuts(mock_context, "save", slot=1)
        with pytest.raises(InvalidSlotError):
            await shortcuts(mock_context, "save", slot=9, style="camelCase")
        with pytest.raises(UnknownStyleOrTypeError):
            await shortcuts(mock_context, "save", slot=1, style="Title Case")
        with pytest.raises(ValueError, match="Unknown action"):
            await shortcuts(mock_context, "delete")

    @pytest.mark.asyncio
    async def test_apply_empty_text_warns(self, namecraft_home, mock_context):
        result = await shortcuts(mock_context, "apply", slot=1, text="  ", output_format="json")
        assert result["error"] == "EmptyInputError"
