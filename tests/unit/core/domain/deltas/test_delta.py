from sourcegraph_client.core.domain.deltas import Delta, DeltaAffectedPerson
from sourcegraph_client.core.domain.entities import Build
from sourcegraph_client.core.domain.specs import DeltaSpec, RepoRevSpec, RepoSpec

PAYLOAD = {
    "Base": {"URI": "github.com/acme/widgets", "Rev": "main", "CommitID": "aaa"},
    "Head": {"URI": "github.com/other/fork", "Rev": "patch-1", "CommitID": "bbb"},
    "BaseCommit": {"ID": "aaa", "Message": "base", "Parents": []},
    "HeadCommit": {"ID": "bbb", "Message": "head"},
    "BaseRepo": {"URI": "github.com/acme/widgets", "DefaultBranch": "main"},
    "HeadRepo": {"URI": "github.com/other/fork", "Fork": True},
    "BaseBuild": {"BID": 1, "Success": True},
    "HeadBuild": None,
}


def test_delta_parses_payload_and_rebuilds_spec():
    delta = Delta.model_validate(PAYLOAD)

    assert delta.head_repo.fork is True
    assert delta.base_commit.id == "aaa"
    assert delta.delta_spec() == DeltaSpec(
        base=RepoRevSpec(RepoSpec(uri="github.com/acme/widgets"), "main", "aaa"),
        head=RepoRevSpec(RepoSpec(uri="github.com/other/fork"), "patch-1", "bbb"),
    )
    assert delta.delta_spec().is_cross_repo


def test_failed_base_and_missing_head_build_is_not_successful():
    delta = Delta.model_validate({**PAYLOAD, "BaseBuild": {"BID": 1, "Success": False, "Failure": True}})

    assert delta.base_and_head_builds_successful() is False
    assert delta.builds_known is False


def test_both_builds_successful():
    delta = Delta.model_validate({**PAYLOAD, "HeadBuild": {"BID": 2, "Success": True}})
    assert delta.builds_known is True
    assert delta.base_and_head_builds_successful() is True


def test_present_but_failed_build_is_known_and_unsuccessful():
    delta = Delta.model_validate({**PAYLOAD, "HeadBuild": {"BID": 2, "Success": False}})
    assert delta.builds_known is True
    assert delta.base_and_head_builds_successful() is False


def test_delta_accepts_spec_instances():
    base = RepoRevSpec(RepoSpec(uri="a/b"), "main")
    head = RepoRevSpec(RepoSpec(uri="a/b"), "dev")
    delta = Delta(base=base, head=head, base_build=Build(success=True), head_build=Build(success=True))
    assert delta.delta_spec() == DeltaSpec(base=base, head=head)
    assert delta.base_and_head_builds_successful()


def test_affected_person_flattens_person_fields():
    person = DeltaAffectedPerson.model_validate(
        {"UID": 3, "Login": "alice", "Email": "a@example.com", "Defs": [{"UnitType": "GoPackage", "Unit": "u", "Path": "F"}]}
    )
    assert person.login == "alice"
    assert person.defs[0].natural_key() == ("GoPackage", "u", "F")
