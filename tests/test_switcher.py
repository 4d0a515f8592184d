import io
from urllib.parse import urlsplit

import pytest

from serverswitch.products import SwitchError
from serverswitch.switcher import replace_host, rewrite_endpoints, switch_server

SERVER = "userarea.zenno.io"


def test_replace_host_keeps_port_path_and_query():
    parts = urlsplit(replace_host("https://old.example.com:8443/api/v1?x=1#f", SERVER))
    assert parts.scheme == "https"
    assert parts.hostname == SERVER
    assert parts.port == 8443
    assert parts.path == "/api/v1"
    assert parts.query == "x=1"
    assert parts.fragment == "f"


def test_replace_host_drops_default_port():
    assert replace_host("https://old.example.com:443/svc", SERVER) == (
        "https://userarea.zenno.io/svc"
    )


def test_replace_host_adds_root_path():
    assert urlsplit(replace_host("http://old.example.com", SERVER)).path == "/"


def test_replace_host_keeps_userinfo():
    parts = urlsplit(replace_host("http://user@old.example.com/", SERVER))
    assert parts.username == "user"
    assert parts.hostname == SERVER


@pytest.mark.parametrize("url", ["not a url", "/relative/path"])
def test_replace_host_rejects_relative(url):
    with pytest.raises(SwitchError, match="Failed to parse the received url"):
        replace_host(url, SERVER)


def test_replace_host_rejects_cannot_be_a_base():
    with pytest.raises(SwitchError, match="Failed to set host"):
        replace_host("mailto:someone@example.com", SERVER)


def test_replace_host_rejects_bad_port():
    with pytest.raises(SwitchError, match="Failed to parse the received url"):
        replace_host("http://old.example.com:99999/", SERVER)


DOC = (
    '<?xml version="1.0" encoding="utf-8"?>\r\n'
    "<configuration>\r\n"
    "  <!-- <endpoint address=\"http://keep.example.com/\"/> -->\r\n"
    "  <client>\r\n"
    '    <endpoint address="http://old.example.com:8080/Service.svc" binding="basicHttpBinding"/>\r\n'
    '    <other address="http://old.example.com/"/>\r\n'
    "  </client>\r\n"
    "</configuration>\r\n"
)


def test_rewrite_endpoints_changes_only_endpoint_address():
    result = rewrite_endpoints(DOC, SERVER)
    assert result == DOC.replace(
        'endpoint address="http://old.example.com:8080/',
        f'endpoint address="http://{SERVER}:8080/',
    )


def test_rewrite_endpoints_is_idempotent():
    once = rewrite_endpoints(DOC, SERVER)
    assert rewrite_endpoints(once, SERVER) == once


def test_rewrite_endpoints_normalises_quotes_and_spacing():
    result = rewrite_endpoints("<a><endpoint name='x'  address='http://h.example.com/' /></a>", SERVER)
    assert result == f'<a><endpoint name="x" address="http://{SERVER}/"/></a>'


def test_rewrite_endpoints_prefixed_address_loses_prefix():
    result = rewrite_endpoints('<endpoint x:address="http://h.example.com/"/>', SERVER)
    assert result == f'<endpoint address="http://{SERVER}/"/>'


def test_rewrite_endpoints_mismatched_end_tag():
    with pytest.raises(SwitchError, match="Reading xml error"):
        rewrite_endpoints("<a></b>", SERVER)


def test_rewrite_endpoints_unterminated_tag():
    with pytest.raises(SwitchError, match="Reading xml error"):
        rewrite_endpoints('<a><endpoint address="http://h.example.com/"', SERVER)


def test_rewrite_endpoints_duplicate_attribute():
    with pytest.raises(SwitchError, match="duplicated attribute"):
        rewrite_endpoints('<endpoint a="1" a="2"/>', SERVER)


def test_switch_server_rewrites_file(tmp_path):
    path = tmp_path / "A.exe.config"
    path.write_bytes(DOC.encode("utf-8"))
    out = io.StringIO()
    switch_server(path, SERVER, out)
    assert path.read_bytes().decode("utf-8") == rewrite_endpoints(DOC, SERVER)
    assert "has been modified." in out.getvalue()


def test_switch_server_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "bad.config"
    path.write_bytes(b"<a>\xff</a>")
    with pytest.raises(SwitchError):
        switch_server(path, SERVER, io.StringIO())
    assert path.read_bytes() == b"<a>\xff</a>"