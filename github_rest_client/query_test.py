"""Unit tests for query-string composition."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

import pytest

from .query import RequestParameters, format_value, param, to_payload
from .requests import (
    CheckRunRequest,
    CheckStatusFilter,
    CollaboratorAffiliation,
    CollaboratorPermission,
    CustomPropertyValueUpdate,
    IssueFilter,
    IssueRequest,
    ItemStateFilter,
    MilestoneRequest,
    MilestoneSort,
    NewMilestone,
    NewReaction,
    OrganizationMembersRequest,
    ReactionType,
    RepositoryCollaboratorListRequest,
    RepositoryIssueRequest,
    RepositoryTrafficRequest,
    SortDirection,
    TrafficDayOrWeek,
    UpsertOrganizationCustomPropertyValues,
    UpsertOrganizationSecret,
)


class _Numbered(Enum):
    ONE = 1


def describe_format_value():
    def it_uses_enum_wire_values():
        assert format_value(SortDirection.DESCENDING) == "desc"
        assert format_value(SortDirection.ASCENDING) == "asc"

    def it_lowercases_bools():
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def it_renders_datetimes_in_utc():
        value = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_value(value) == "2024-01-02T03:04:05Z"

    def it_joins_lists_with_commas():
        assert format_value(["bug", "help wanted"]) == "bug,help wanted"

    def it_rejects_enums_without_a_wire_value():
        with pytest.raises(TypeError):
            format_value(_Numbered.ONE)

    def it_rejects_unknown_types():
        with pytest.raises(TypeError):
            format_value(object())


def describe_RequestParameters():
    def it_emits_documented_defaults():
        assert IssueRequest().to_parameters() == {
            "filter": "assigned",
            "state": "open",
            "sort": "created",
            "direction": "desc",
        }

    def it_omits_unset_fields():
        assert OrganizationMembersRequest().to_parameters() == {}
        assert CheckRunRequest().to_parameters() == {}

    def it_omits_empty_collections():
        assert "labels" not in IssueRequest(labels=[]).to_parameters()

    def it_maps_fields_onto_query_keys():
        request = MilestoneRequest(
            state=ItemStateFilter.CLOSED,
            sort_property=MilestoneSort.COMPLETENESS,
            sort_direction=SortDirection.DESCENDING,
        )
        assert request.to_parameters() == {"state": "closed", "sort": "completeness", "direction": "desc"}

    def it_includes_inherited_fields():
        request = RepositoryIssueRequest(filter=IssueFilter.ALL, milestone="*", assignee="none", labels=["bug", "ui"])
        parameters = request.to_parameters()
        assert parameters["filter"] == "all"
        assert parameters["milestone"] == "*"
        assert parameters["assignee"] == "none"
        assert parameters["labels"] == "bug,ui"
        assert "creator" not in parameters

    def it_renders_since():
        request = IssueRequest(since=datetime(2024, 3, 1, tzinfo=timezone.utc))
        assert request.to_parameters()["since"] == "2024-03-01T00:00:00Z"

    def it_renders_collaborator_filters():
        request = RepositoryCollaboratorListRequest(
            affiliation=CollaboratorAffiliation.DIRECT, permission=CollaboratorPermission.ADMIN
        )
        assert request.to_parameters() == {"affiliation": "direct", "permission": "admin"}

    def it_renders_check_run_filters():
        request = CheckRunRequest(check_name="build", status=CheckStatusFilter.IN_PROGRESS)
        assert request.to_parameters() == {"check_name": "build", "status": "in_progress"}

    def it_renders_traffic_period():
        assert RepositoryTrafficRequest(per=TrafficDayOrWeek.WEEK).to_parameters() == {"per": "week"}

    def it_never_carries_pagination_keys():
        parameters = IssueRequest().to_parameters()
        assert "page" not in parameters
        assert "per_page" not in parameters

    def it_is_idempotent():
        request = IssueRequest(labels=["bug"])
        assert request.to_parameters() == request.to_parameters()

    def it_supports_custom_request_types():
        @dataclass
        class SearchRequest(RequestParameters):
            term: str | None = param("q")
            exact: bool = False

        assert SearchRequest(term="octokit").to_parameters() == {"q": "octokit", "exact": "false"}


def describe_to_payload():
    def it_drops_none_members():
        assert to_payload(UpsertOrganizationSecret(encrypted_value="v", key_id="k")) == {
            "encrypted_value": "v",
            "key_id": "k",
        }

    def it_uses_enum_values():
        assert to_payload(NewReaction(content=ReactionType.PLUS_ONE)) == {"content": "+1"}

    def it_formats_datetimes():
        milestone = NewMilestone(title="v1", due_on=datetime(2024, 5, 1, tzinfo=timezone.utc))
        assert milestone.to_payload() == {"title": "v1", "due_on": "2024-05-01T00:00:00Z"}

    def it_converts_nested_models():
        values = UpsertOrganizationCustomPropertyValues(
            repository_names=["hello-world"],
            properties=[CustomPropertyValueUpdate(property_name="team", value="core")],
        )
        assert to_payload(values) == {
            "repository_names": ["hello-world"],
            "properties": [{"property_name": "team", "value": "core"}],
        }

    def it_converts_plain_dicts():
        assert to_payload({"lock_reason": None, "body": "hi"}) == {"body": "hi"}
