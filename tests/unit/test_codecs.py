"""Unit tests for the repository codecs."""

import json

from pydantic import ValidationError
import pytest

from tt_calendar_sync.adapters.codecs import GroupedJsonCodec, JsonListCodec
from tt_calendar_sync.adapters.sports_hall_repository import sports_hall_key
from tt_calendar_sync.adapters.team_lead_repository import team_lead_key
from tt_calendar_sync.domain.model import SportsHall, TeamLead


@pytest.fixture
def grouped_codec() -> GroupedJsonCodec[TeamLead]:
    return GroupedJsonCodec(TeamLead, team_lead_key, group_by="runde")


class TestJsonListCodec:
    def test_serialize_uses_camel_case_field_names(self):
        codec = JsonListCodec(SportsHall, sports_hall_key)
        hall = SportsHall(club="TTC Bonn", sportshall_number=1, postal_code="53111", name="Halle A")

        data = json.loads(codec.serialize([hall]))

        assert data == [
            {
                "club": "TTC Bonn",
                "sportshallNumber": 1,
                "postalCode": "53111",
                "city": "",
                "street": "",
                "houseNumber": "",
                "name": "Halle A",
            }
        ]

    def test_deserialize_accepts_camel_case_records(self):
        codec = JsonListCodec(SportsHall, sports_hall_key)

        halls = codec.deserialize(json.dumps([{"club": "TTC Bonn", "sportshallNumber": 2, "city": "Bonn"}]))

        assert halls == [SportsHall(club="TTC Bonn", sportshall_number=2, city="Bonn")]

    def test_deserialize_rejects_wrong_shape(self):
        codec = JsonListCodec(SportsHall, sports_hall_key)

        with pytest.raises(ValidationError):
            codec.deserialize(json.dumps({"club": "TTC Bonn"}))

    def test_arrange_keeps_order(self):
        codec = JsonListCodec(SportsHall, sports_hall_key)
        halls = [SportsHall(club="B", sportshall_number=2), SportsHall(club="A", sportshall_number=1)]

        assert codec.arrange(halls) == halls

    def test_primary_key_uses_key_function(self):
        codec = JsonListCodec(SportsHall, sports_hall_key)
        a = SportsHall(club="TTC Bonn", sportshall_number=1, name="Alt")
        b = SportsHall(club="TTC Bonn", sportshall_number=1, name="Neu")
        c = SportsHall(club="TTC Bonn", sportshall_number=2, name="Alt")

        assert codec.is_same_primary_key(a, b)
        assert not codec.is_same_primary_key(a, c)


class TestGroupedJsonCodec:
    def test_serialize_groups_by_attribute_without_repeating_it(self, grouped_codec):
        leads = [
            TeamLead(full_name="Anna", team_name="TTC I", age_class="Damen", runde="VR"),
            TeamLead(full_name="Ben", team_name="TTC II", runde="RR", email="ben@example.com"),
            TeamLead(full_name="Carl", team_name="TTC III", runde="VR"),
        ]

        data = json.loads(grouped_codec.serialize(leads))

        assert list(data) == ["VR", "RR"]
        assert data["VR"][0] == {"fullName": "Anna", "teamName": "TTC I", "ageClass": "Damen", "email": ""}
        assert [record["fullName"] for record in data["VR"]] == ["Anna", "Carl"]
        assert "runde" not in data["RR"][0]

    def test_deserialize_flattens_and_annotates_group(self, grouped_codec):
        content = json.dumps(
            {
                "VR": [{"fullName": "Anna", "teamName": "TTC I"}],
                "RR": [{"fullName": "Ben", "teamName": "TTC II", "ageClass": "mJ15", "email": "b@x.de"}],
            }
        )

        leads = grouped_codec.deserialize(content)

        assert leads == [
            TeamLead(full_name="Anna", team_name="TTC I", runde="VR"),
            TeamLead(full_name="Ben", team_name="TTC II", age_class="mJ15", runde="RR", email="b@x.de"),
        ]

    def test_deserialize_is_inverse_of_serialize(self, grouped_codec):
        leads = [
            TeamLead(full_name="Anna", team_name="TTC I", runde="VR"),
            TeamLead(full_name="Ben", team_name="TTC II", age_class="Herren", runde="VR"),
            TeamLead(full_name="Anna", team_name="TTC I", runde="RR"),
        ]

        assert grouped_codec.arrange(leads) == leads
        assert grouped_codec.deserialize(grouped_codec.serialize(leads)) == leads

    def test_arrange_groups_by_first_appearance(self, grouped_codec):
        anna_vr = TeamLead(full_name="Anna", team_name="TTC I", runde="VR")
        anna_rr = TeamLead(full_name="Anna", team_name="TTC I", runde="RR")
        ben_vr = TeamLead(full_name="Ben", team_name="TTC II", runde="VR")

        arranged = grouped_codec.arrange([anna_vr, anna_rr, ben_vr])

        assert arranged == [anna_vr, ben_vr, anna_rr]
        assert grouped_codec.deserialize(grouped_codec.serialize([anna_vr, anna_rr, ben_vr])) == arranged

    def test_deserialize_tolerates_null_fields_and_groups(self, grouped_codec):
        content = json.dumps(
            {
                "VR": [{"fullName": "Anna", "teamName": "TTC I", "ageClass": None, "email": None}],
                "RR": None,
            }
        )

        assert grouped_codec.deserialize(content) == [TeamLead(full_name="Anna", team_name="TTC I", runde="VR")]

    def test_deserialize_rejects_list_payload(self, grouped_codec):
        with pytest.raises(ValidationError):
            grouped_codec.deserialize("[]")

    def test_empty_collection_round_trips(self, grouped_codec):
        assert grouped_codec.serialize([]) == "{}"
        assert grouped_codec.deserialize("{}") == []
