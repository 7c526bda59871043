"""Tests for paste payload selection."""

from deformat.clipboard import ClipboardPayload, read_payload


class TestClipboardPayload:
    def test_prefers_html(self):
        payload = ClipboardPayload(html="<b>hi</b>", plain="hi")
        assert payload.select() == "<b>hi</b>"

    def test_falls_back_to_plain_when_html_empty(self):
        assert ClipboardPayload(html="", plain="hi").select() == "hi"
        assert ClipboardPayload(plain="hi").select() == "hi"

    def test_empty_payload(self):
        payload = ClipboardPayload()
        assert payload.select() == ""


class TestReadPayload:
    def test_reads_both_flavours(self, tmp_path):
        html = tmp_path / "paste.html"
        text = tmp_path / "paste.txt"
        html.write_text("<i>x</i>", encoding="utf-8")
        text.write_text("x", encoding="utf-8")

        payload = read_payload(html, text)

        assert payload.html == "<i>x</i>"
        assert payload.plain == "x"

    def test_missing_file_is_absent_flavour(self, tmp_path, caplog):
        text = tmp_path / "paste.txt"
        text.write_text("plain", encoding="utf-8")

        payload = read_payload(tmp_path / "missing.html", text)

        assert payload.html is None
        assert payload.select() == "plain"
        assert "Could not read html payload" in caplog.text

    def test_no_paths(self):
        payload = read_payload()
        assert payload.html is None
        assert payload.plain is None
