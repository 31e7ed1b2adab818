import pytest

from sourcegraph_client.core.application.ports import DeltasPort, OrgsPort, ReposPort
from sourcegraph_client.core.domain.deltas import DeltaDefs, DeltaFiles, UnitDelta
from sourcegraph_client.core.domain.entities import OrgSettings, PlanSettings, Readme, Repo, SourceUnit
from sourcegraph_client.core.domain.specs import OrgSpec, RepoRevSpec, RepoSpec
from sourcegraph_client.infrastructure.fakes import FakeDeltasService, FakeOrgsService, FakeReposService


def test_fakes_implement_ports():
    assert isinstance(FakeDeltasService(), DeltasPort)
    assert isinstance(FakeOrgsService(), OrgsPort)
    assert isinstance(FakeReposService(), ReposPort)


def test_fake_deltas_delegates_and_records(same_repo_delta):
    unit = UnitDelta(head=SourceUnit(type="GoPackage", name="a"))
    fake = FakeDeltasService(list_units_fn=lambda ds, opt: [unit])

    assert fake.list_units(same_repo_delta).value == [unit]
    assert fake.list_defs(same_repo_delta).value == DeltaDefs()
    assert fake.list_files(same_repo_delta).value == DeltaFiles()
    assert fake.list_affected_clients(same_repo_delta).value == []
    assert [name for name, _, _ in fake.calls] == ["list_units", "list_defs", "list_files", "list_affected_clients"]


def test_unconfigured_get_returns_empty_value(same_repo_delta):
    response = FakeDeltasService().get(same_repo_delta)

    assert response.value is None
    assert response.status_code == 200
    assert FakeOrgsService().get(OrgSpec.by_name("acme")).value is None


def test_fake_orgs_keeps_settings_per_org():
    fake = FakeOrgsService()
    team = OrgSettings(plan=PlanSettings(name="team"))

    fake.update_settings(OrgSpec.by_name("acme"), team)

    assert fake.get_settings(OrgSpec.by_name("acme")).value == team
    assert fake.get_settings(OrgSpec.by_uid(3)).value == OrgSettings()


def test_fake_repos_create_get_and_readme():
    fake = FakeReposService(readmes={"a/b": Readme(path="README.md")})

    assert fake.create(Repo(uri="a/b")).status_code == 201
    assert fake.get(RepoSpec(uri="a/b")).value.uri == "a/b"
    assert [r.uri for r in fake.list().value] == ["a/b"]
    assert fake.get_readme(RepoRevSpec(RepoSpec(uri="a/b"), "main")).value.path == "README.md"
    with pytest.raises(LookupError):
        fake.get(RepoSpec(rid=99))
