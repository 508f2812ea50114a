from __future__ import annotations

import pytest

from twitch_irc.errors import (
    InvalidBadgeError,
    InvalidBadgeVersionError,
    InvalidBoolValueError,
    InvalidIntValueError,
    InvalidTagError,
    InvalidUserTypeError,
    MalformedEmoteError,
    MissingTagError,
)
from twitch_irc.irc import tags as tagmod
from twitch_irc.irc.tags import Badge, BadgeKind, Emote, TagMap, UserType, parse_tags


def test_parse_tags_keeps_empty_values():
    blob = (
        "badge-info=;badges=;color=;display-name=<user>;"
        "emote-sets=0,300374282;user-id=12345678;user-type="
    )
    expected = {
        "badge-info": "",
        "badges": "",
        "color": "",
        "display-name": "<user>",
        "emote-sets": "0,300374282",
        "user-id": "12345678",
        "user-type": "",
    }
    actual = parse_tags(blob)
    assert actual == expected
    for key, value in expected.items():
        assert actual[key] == value


def test_parse_tags_splits_on_first_equals_only():
    tags = parse_tags("client-nonce=a=b;reply-parent-msg-body=x")
    assert tags["client-nonce"] == "a=b"


def test_parse_tags_strict_rejects_entry_without_value():
    with pytest.raises(InvalidTagError) as exc_info:
        parse_tags("mod=0;turbo;subscriber=1")
    assert exc_info.value.value == "turbo"


def test_parse_tags_strict_rejects_empty_key():
    with pytest.raises(InvalidTagError):
        parse_tags("=1;mod=0")


def test_parse_tags_legacy_maps_missing_value_to_empty():
    tags = parse_tags("mod=0;turbo;;subscriber=1", strict=False)
    assert tags == {"mod": "0", "turbo": "", "subscriber": "1"}


class TestTypedAccessors:
    def setup_method(self):
        self.tags = parse_tags(
            "mod=1;turbo=0;vip=true;bits=100;neg=-1;big=4294967296;max=4294967295;"
            "emote-sets=0,33,50;bad-list=1,x,3;empty="
        )

    def test_get_bool_true_and_false(self):
        assert self.tags.get_bool("mod") is True
        assert self.tags.get_bool("turbo") is False

    @pytest.mark.parametrize("key", ["vip", "bits", "empty"])
    def test_get_bool_rejects_other_values(self, key):
        with pytest.raises(InvalidBoolValueError) as exc_info:
            self.tags.get_bool(key)
        assert exc_info.value.tag == key
        assert exc_info.value.value == self.tags[key]

    def test_get_bool_missing(self):
        with pytest.raises(MissingTagError) as exc_info:
            self.tags.get_bool("subscriber")
        assert exc_info.value.tag == "subscriber"

    def test_get_int(self):
        assert self.tags.get_int("bits") == 100
        assert self.tags.get_int("max") == 4294967295

    @pytest.mark.parametrize("key", ["neg", "big", "vip", "empty"])
    def test_get_int_rejects_non_u32(self, key):
        with pytest.raises(InvalidIntValueError) as exc_info:
            self.tags.get_int(key)
        assert exc_info.value.tag == key

    def test_get_int_list(self):
        assert self.tags.get_int_list("emote-sets") == [0, 33, 50]

    def test_get_int_list_fails_whole_list(self):
        with pytest.raises(InvalidIntValueError) as exc_info:
            self.tags.get_int_list("bad-list")
        assert exc_info.value.value == "1,x,3"

    def test_module_level_functions_delegate(self):
        assert tagmod.get_bool(self.tags, "mod") is True
        assert tagmod.get_int(self.tags, "bits") == 100
        assert tagmod.get_int_list(self.tags, "emote-sets") == [0, 33, 50]


class TestBadges:
    def test_single_broadcaster_badge(self):
        tags = TagMap(badges="broadcaster/1")
        assert tags.get_badges() == [Badge(BadgeKind.BROADCASTER, 1, "broadcaster")]

    def test_empty_badges_value(self):
        assert TagMap(badges="").get_badges() == []

    def test_blank_entries_are_skipped(self):
        badges = TagMap(badges="moderator/1,,subscriber/12,").get_badges()
        assert [b.kind for b in badges] == [BadgeKind.MODERATOR, BadgeKind.SUBSCRIBER]
        assert badges[1].version == 12

    def test_unknown_badge_is_other(self):
        (badge,) = TagMap(badges="premium/1").get_badges()
        assert badge.kind is BadgeKind.OTHER
        assert badge.name == "premium"

    def test_missing_version(self):
        with pytest.raises(InvalidBadgeError):
            TagMap(badges="moderator/1,vip").get_badges()

    def test_non_integer_version(self):
        with pytest.raises(InvalidBadgeVersionError) as exc_info:
            TagMap(badges="subscriber/x").get_badges()
        assert exc_info.value.value == "subscriber/x"

    def test_badges_key_required(self):
        with pytest.raises(MissingTagError) as exc_info:
            TagMap().get_badges()
        assert exc_info.value.tag == "badges"


class TestEmotes:
    def test_parse_emote_list(self):
        emotes = TagMap(emotes="25:0-4,1902:6-10").get_emotes()
        assert emotes == [Emote("25", 0, 4), Emote("1902", 6, 10)]

    def test_empty_emotes(self):
        assert tagmod.get_emotes(TagMap(emotes="")) == []

    @pytest.mark.parametrize("value", ["25", "25:0", "25:a-4", "25:0-b"])
    def test_malformed_emote_fails_list(self, value):
        with pytest.raises(MalformedEmoteError):
            TagMap(emotes=f"1:0-1,{value}").get_emotes()

    def test_emotes_key_required(self):
        with pytest.raises(MissingTagError):
            TagMap().get_emotes()


class TestUserType:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", UserType.USER),
            ("admin", UserType.ADMIN),
            ("global_mod", UserType.GLOBAL_MOD),
            ("staff", UserType.STAFF),
        ],
    )
    def test_known_values(self, raw, expected):
        assert TagMap({"user-type": raw}).get_user_type() is expected

    def test_unknown_value_is_invalid_tag(self):
        with pytest.raises(InvalidTagError) as exc_info:
            TagMap({"user-type": "mod"}).get_user_type()
        assert exc_info.value.value == "mod"
        assert isinstance(exc_info.value.__cause__, InvalidUserTypeError)

    def test_missing(self):
        with pytest.raises(MissingTagError):
            tagmod.get_user_type(TagMap())


class TestTagMapImmutability:
    def setup_method(self):
        self.tags = parse_tags("mod=1;display-name=abc")

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda t: t.__setitem__("mod", "0"),
            lambda t: t.__delitem__("mod"),
            lambda t: t.update(mod="0"),
            lambda t: t.pop("mod"),
            lambda t: t.setdefault("vip", "1"),
            lambda t: t.clear(),
        ],
    )
    def test_mutation_is_rejected(self, mutate):
        with pytest.raises(TypeError):
            mutate(self.tags)
        assert self.tags == {"mod": "1", "display-name": "abc"}

    def test_equal_maps_hash_equal(self):
        assert hash(self.tags) == hash(TagMap({"display-name": "abc", "mod": "1"}))
