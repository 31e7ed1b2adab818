import pytest

from sourcegraph_client.core.domain.entities import Repo
from sourcegraph_client.core.domain.specs import (
    RepoRevSpec,
    RepoSpec,
    parse_repo_spec,
    unmarshal_repo_rev_spec,
)
from sourcegraph_client.core.exceptions import InvalidSpecError, MalformedSpecError


def test_uri_path_component():
    assert RepoSpec(uri="github.com/acme/widgets").path_component() == "github.com/acme/widgets"


def test_numeric_path_component_round_trip():
    spec = RepoSpec(rid=12)
    assert spec.path_component() == "R$12"
    assert parse_repo_spec("R$12") == spec


def test_empty_repo_spec_is_a_programmer_error():
    with pytest.raises(InvalidSpecError):
        RepoSpec().path_component()


def test_rev_path_component_includes_commit_id_when_known():
    spec = RepoRevSpec(RepoSpec(uri="a/b"), rev="main", commit_id="c0ffee")
    assert spec.rev_path_component() == "main===c0ffee"
    assert spec.route_vars() == {"RepoSpec": "a/b", "Rev": "main===c0ffee"}


def test_empty_revision_is_a_programmer_error():
    with pytest.raises(InvalidSpecError):
        RepoRevSpec(RepoSpec(uri="a/b"), rev="").rev_path_component()


def test_unmarshal_repo_rev_spec_splits_commit_id():
    spec = unmarshal_repo_rev_spec({"RepoSpec": "a/b", "Rev": "main===c0ffee"})
    assert spec == RepoRevSpec(RepoSpec(uri="a/b"), rev="main", commit_id="c0ffee")


@pytest.mark.parametrize("bad", ["", "R$", "R$x", "R$0"])
def test_parse_repo_spec_rejects_malformed(bad):
    with pytest.raises(MalformedSpecError):
        parse_repo_spec(bad)


def test_from_payload_reads_api_shape():
    payload = {"URI": "a/b", "Rev": "main", "CommitID": "c0ffee"}
    assert RepoRevSpec.from_payload(payload) == RepoRevSpec(RepoSpec(uri="a/b"), "main", "c0ffee")


def test_uri_and_rid_collapse_to_uri():
    spec = RepoSpec(uri="a/b", rid=17)

    assert spec == RepoSpec(uri="a/b")
    assert spec.rid == 0
    assert parse_repo_spec(spec.path_component()) == spec


def test_entity_and_payload_specs_are_canonical():
    assert Repo(uri="a/b", rid=17).repo_spec() == RepoSpec(uri="a/b")
    assert RepoRevSpec.from_payload({"URI": "a/b", "RID": 17, "Rev": "main"}).repo == RepoSpec(uri="a/b")
    assert Repo(uri="a/b", rid=17).repo_spec() == parse_repo_spec("a/b")


def test_uri_that_reads_back_as_an_id_is_rejected():
    with pytest.raises(InvalidSpecError):
        RepoSpec(uri="R$abc")


def test_revision_containing_commit_separator_is_rejected():
    with pytest.raises(InvalidSpecError):
        RepoRevSpec(RepoSpec(uri="a/b"), rev="x===y")


def test_commit_id_may_contain_separator():
    spec = RepoRevSpec(RepoSpec(uri="a/b"), rev="main", commit_id="c===d")
    assert unmarshal_repo_rev_spec(spec.route_vars()) == spec
