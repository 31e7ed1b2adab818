from sourcegraph_client.core.application.options.list_options import ListOptions


class OrgListMembersOptions(ListOptions):
    pass
