"""Organization members, custom properties and team discussions."""

from .. import accept_headers, ensure, probe
from ..models import API_OPTIONS_NONE, ApiOptions
from ..paths import path
from ..requests import (
    NewTeamDiscussion,
    OrganizationMembershipUpdate,
    OrganizationMembersRequest,
    UpdateTeamDiscussion,
    UpsertOrganizationCustomProperties,
    UpsertOrganizationCustomProperty,
    UpsertOrganizationCustomPropertyValues,
)
from .base import ApiClient

# returned instead of 204/404 when the requester is not an organization member
NOT_A_MEMBER_REDIRECT = 302


class OrganizationMembersClient(ApiClient):
    async def get_all(
        self,
        org: str,
        request: OrganizationMembersRequest | None = None,
        options: ApiOptions = API_OPTIONS_NONE,
    ) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        request = request or OrganizationMembersRequest()
        return await self.api_connection.get_all(
            path("orgs", org, "members"), params=request.to_parameters(), options=options
        )

    async def get_all_public(self, org: str, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(path("orgs", org, "public_members"), options=options)

    async def check_member(self, org: str, user: str) -> bool:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        return await probe.check(
            self.connection, path("orgs", org, "members", user), also_false=(NOT_A_MEMBER_REDIRECT,)
        )

    async def check_member_public(self, org: str, user: str) -> bool:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        return await probe.check(self.connection, path("orgs", org, "public_members", user))

    async def delete(self, org: str, user: str) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        await self.api_connection.delete(path("orgs", org, "members", user))

    async def publicize(self, org: str, user: str) -> bool:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        return await probe.check(self.connection, path("orgs", org, "public_members", user), method="put")

    async def conceal(self, org: str, user: str) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        await self.api_connection.delete(path("orgs", org, "public_members", user))

    async def get_organization_membership(self, org: str, user: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        return await self.api_connection.get(path("orgs", org, "memberships", user))

    async def add_or_update_organization_membership(
        self, org: str, user: str, membership: OrganizationMembershipUpdate
    ) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        ensure.not_none(membership, "membership")
        return await self.api_connection.put(path("orgs", org, "memberships", user), membership)

    async def remove_organization_membership(self, org: str, user: str) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(user, "user")
        await self.api_connection.delete(path("orgs", org, "memberships", user))

    async def get_all_pending_invitations(self, org: str, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            path("orgs", org, "invitations"),
            accept=accept_headers.accept_for("orgs.invitations"),
            options=options,
        )


class OrganizationCustomPropertyValuesClient(ApiClient):
    async def get_all(
        self, org: str, repository_query: str | None = None, options: ApiOptions = API_OPTIONS_NONE
    ) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(options, "options")
        uri = path("orgs", org, "properties", "values")
        if repository_query:
            return await self.api_connection.get_all(
                uri, params={"repository_query": repository_query}, options=options
            )
        return await self.api_connection.get_all(uri, options=options)

    async def create_or_update(self, org: str, property_values: UpsertOrganizationCustomPropertyValues) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(property_values, "property_values")
        ensure.not_none_or_empty_collection(property_values.repository_names, "property_values.repository_names")
        ensure.not_none_or_empty_collection(
            property_values.properties, "property_values.properties", required=("property_name",)
        )
        await self.api_connection.patch(path("orgs", org, "properties", "values"), property_values)


class OrganizationCustomPropertiesClient(ApiClient):
    def __init__(self, api_connection):
        super().__init__(api_connection)
        self.values = OrganizationCustomPropertyValuesClient(api_connection)

    async def get_all(self, org: str) -> list:
        ensure.not_none_or_empty_string(org, "org")
        return await self.api_connection.get(path("orgs", org, "properties", "schema"))

    async def get(self, org: str, property_name: str) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(property_name, "property_name")
        return await self.api_connection.get(path("orgs", org, "properties", "schema", property_name))

    async def create_or_update_all(self, org: str, properties: UpsertOrganizationCustomProperties) -> list:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none(properties, "properties")
        ensure.not_none_or_empty_collection(properties.properties, "properties.properties")
        return await self.api_connection.patch(path("orgs", org, "properties", "schema"), properties)

    async def create_or_update(
        self, org: str, property_name: str, custom_property: UpsertOrganizationCustomProperty
    ) -> dict:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(property_name, "property_name")
        ensure.not_none(custom_property, "custom_property")
        ensure.not_none_or_empty_string(custom_property.value_type, "custom_property.value_type")
        return await self.api_connection.put(
            path("orgs", org, "properties", "schema", property_name), custom_property
        )

    async def delete(self, org: str, property_name: str) -> None:
        ensure.not_none_or_empty_string(org, "org")
        ensure.not_none_or_empty_string(property_name, "property_name")
        await self.api_connection.delete(path("orgs", org, "properties", "schema", property_name))


class TeamDiscussionsClient(ApiClient):
    """Team discussions need both the discussions and the reactions preview types."""

    _accept = accept_headers.accept_for("teams.discussions")

    async def get_all(self, team_id: int, options: ApiOptions = API_OPTIONS_NONE) -> list:
        ensure.not_none(options, "options")
        return await self.api_connection.get_all(
            path("teams", team_id, "discussions"), accept=self._accept, options=options
        )

    async def get(self, team_id: int, discussion_number: int) -> dict:
        return await self.api_connection.get(
            path("teams", team_id, "discussions", discussion_number), accept=self._accept
        )

    async def create(self, team_id: int, discussion: NewTeamDiscussion) -> dict:
        ensure.not_none(discussion, "discussion")
        return await self.api_connection.post(path("teams", team_id, "discussions"), discussion, accept=self._accept)

    async def update(self, team_id: int, discussion_number: int, discussion: UpdateTeamDiscussion) -> dict:
        ensure.not_none(discussion, "discussion")
        return await self.api_connection.patch(
            path("teams", team_id, "discussions", discussion_number), discussion, accept=self._accept
        )

    async def delete(self, team_id: int, discussion_number: int) -> None:
        await self.api_connection.delete(
            path("teams", team_id, "discussions", discussion_number), accept=self._accept
        )


class OrganizationsClient:
    """Groups the organization sub-clients under one attribute."""

    def __init__(self, api_connection):
        self.member = OrganizationMembersClient(api_connection)
        self.custom_property = OrganizationCustomPropertiesClient(api_connection)
        self.team_discussion = TeamDiscussionsClient(api_connection)
