from datetime import date, datetime

from lascorbe.html_utils import encode_query_url, join_root_url, root_relative
from lascorbe.site import LASCORBE, Language
from lascorbe.utils import capitalize_words, format_date, normalize_tag


def test_normalize_tag():
    assert normalize_tag("Swift") == "swift"
    assert normalize_tag("Swift UI") == "swift-ui"
    assert normalize_tag(" C++ ") == "c"
    assert normalize_tag("server-side") == "server-side"
    assert normalize_tag("++") == "tag-2b2b"
    assert normalize_tag("C#") != normalize_tag("++")


def test_format_date():
    assert format_date(datetime(2020, 1, 5, 13, 30)) == "January 5, 2020"
    assert format_date(date(2019, 12, 31)) == "December 31, 2019"


def test_capitalize_words():
    assert capitalize_words("iOS") == "Ios"
    assert capitalize_words("swift tips") == "Swift Tips"
    assert capitalize_words("don't") == "Don't"
    assert capitalize_words("swift-ui") == "Swift-Ui"
    assert capitalize_words("server side_swift") == "Server Side_Swift"


def test_url_helpers():
    assert join_root_url("https://a.com/", "/b") == "https://a.com/b"
    assert join_root_url("", "/b") == "/b"
    assert root_relative("posts/a") == "/posts/a"
    assert root_relative("/posts/a") == "/posts/a"
    assert root_relative("mailto:x@y.z") == "mailto:x@y.z"
    assert encode_query_url("https://x.com/?q=a b&r=ü") == "https://x.com/?q=a%20b&r=%C3%BC"


def test_site_urls():
    assert LASCORBE.url_for("") == "https://lascorbe.com/"
    assert LASCORBE.url_for("/images/a.png") == "https://lascorbe.com/images/a.png"
    assert LASCORBE.url_for("https://cdn.example/a.png") == "https://cdn.example/a.png"
    assert Language.from_code("EN") is Language.ENGLISH
    assert [s.name for s in LASCORBE.social_media] == ["Email", "GitHub", "Twitter", "LinkedIn"]
