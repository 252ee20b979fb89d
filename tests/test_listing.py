import pytest

from mf_ftp.core.base import ClassificationError, ListingKind
from mf_ftp.core.models import DatasetEntry, DatasetMemberEntry, LoadLibMemberEntry, USSEntry
from mf_ftp.parsers.listing import TableClassifier, parse_listing, parser_for


@pytest.mark.parametrize("header,expected", [
    ("total 554", ListingKind.USS),
    ("Volume Unit    Referred Ext Used Recfm Lrecl BlkSz Dsorg Dsname", ListingKind.DATASET),
    (" Name     VV.MM   Created       Changed      Size  Init   Mod   Id", ListingKind.MEMBER),
    (" Name      Size     TTR   Alias-of AC --------- Attributes --------- Amode Rmode ", ListingKind.LOADLIB),
    ("-rw-------   1 USER  GROUP    2152185 Nov  7 20:40 /tmp/abc.txt", ListingKind.USS),
    ("lrwxrwxrwx   1 USER  GROUP         12 Jul 13  2017 /tmp -> $SYSNAME/tmp", ListingKind.USS),
    ("EDC5129I No such file or directory.", ListingKind.UNRECOGNIZED),
    ("NOSPACEHERE", ListingKind.UNRECOGNIZED),
])
def test_classify(header, expected):
    assert TableClassifier().classify([header]) is expected


def test_classification_is_case_sensitive():
    assert TableClassifier().classify(["volume unit dsname"]) is ListingKind.UNRECOGNIZED


def test_empty_listing_is_unrecognized_but_parses_to_nothing():
    assert TableClassifier().classify([]) is ListingKind.UNRECOGNIZED
    assert parse_listing([]) == []


def test_unrecognized_header_raises():
    with pytest.raises(ClassificationError) as excinfo:
        parse_listing(["EDC5129I No such file or directory."])

    assert excinfo.value.header == "EDC5129I No such file or directory."
    assert "Unrecognized file list header" in str(excinfo.value)


def test_parser_for_unrecognized_kind():
    with pytest.raises(ValueError):
        parser_for(ListingKind.UNRECOGNIZED)


def test_dispatch_by_kind(dataset_list, member_list, loadlib_member_list, uss_list):
    assert all(isinstance(e, DatasetEntry) for e in parse_listing(dataset_list))
    assert all(isinstance(e, DatasetMemberEntry) for e in parse_listing(member_list))
    assert all(isinstance(e, LoadLibMemberEntry) for e in parse_listing(loadlib_member_list))
    assert all(isinstance(e, USSEntry) for e in parse_listing(uss_list, current_year=2024))


def test_options_reach_the_parser(unpadded_dataset_list, uss_list):
    datasets = parse_listing(unpadded_dataset_list, keep_raw_fields=True)
    files = parse_listing(uss_list, current_year=1999)

    assert datasets[0].raw_fields["Volume"] == "XRFS79"
    assert files[0].last_modified.year == 1999
