import pytest

from tests.utils import make_response, multipart_response
from worker_tools.contract import ModuleType
from worker_tools.exceptions import FatalError, UserError
from worker_tools.versions.content import DEFAULT_SCRIPT_NAME, parse_modules


def test_multipart_bundle_yields_entrypoint_and_additional_modules(session, identity):
    session.version_content.return_value = multipart_response(
        [
            ("main.js", "main.js", "application/javascript+module", b'import { hi } from "./util.js";'),
            ("util.js", "util.js", "application/javascript+module", b"export const hi = 1;"),
        ],
        entrypoint="main.js",
    )

    sources = parse_modules(session, identity, "MOCK-VERSION-ID")

    session.version_content.assert_called_once_with(identity, "MOCK-VERSION-ID")
    assert sources.main.name == "main.js"
    assert sources.main.type == ModuleType.ESM
    assert sources.main.content == b'import { hi } from "./util.js";'
    assert [m.name for m in sources.modules] == ["util.js"]
    assert sources.modules[0].content == b"export const hi = 1;"


def test_multipart_bundle_keeps_part_order_and_types(session, identity):
    wasm = b"\x00asm\x01\x00\x00\x00"
    session.version_content.return_value = multipart_response(
        [
            ("data.txt", "data.txt", "text/plain", b"some text"),
            ("index.js", "index.js", "application/javascript+module", b"export default {}"),
            ("add.wasm", "add.wasm", "application/wasm", wasm),
            ("requirements.txt", "requirements.txt", "text/x-python-requirement", b"fastapi"),
        ],
        entrypoint="index.js",
    )

    sources = parse_modules(session, identity, "MOCK-VERSION-ID")

    assert sources.main.name == "index.js"
    assert [(m.name, m.type) for m in sources.modules] == [
        ("data.txt", ModuleType.TEXT),
        ("add.wasm", ModuleType.COMPILED_WASM),
        ("requirements.txt", ModuleType.PYTHON_REQUIREMENT),
    ]
    assert sources.modules[1].content == wasm


def test_static_content_manifest_is_unsupported(session, identity):
    session.version_content.return_value = multipart_response(
        [
            ("index.js", "index.js", "application/javascript+module", b"export default {}"),
            ("__STATIC_CONTENT_MANIFEST", "__STATIC_CONTENT_MANIFEST", "text/plain", b"{}"),
        ],
        entrypoint="index.js",
    )

    with pytest.raises(UserError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "Workers Sites is not supported for `versions secret put` today."


def test_missing_entrypoint_header_is_fatal(session, identity):
    session.version_content.return_value = multipart_response(
        [("index.js", "index.js", "application/javascript+module", b"export default {}")]
    )

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "Got modules without cf-entrypoint header"


def test_missing_entrypoint_part_is_fatal(session, identity):
    session.version_content.return_value = multipart_response(
        [("index.js", "index.js", "application/javascript+module", b"export default {}")],
        entrypoint="worker.js",
    )

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "Could not find entrypoint in form-data"


def test_single_script_yields_default_main_module(session, identity):
    body = b"addEventListener('fetch', (event) => event.respondWith(new Response('ok')));"
    session.version_content.return_value = make_response(body, {"content-type": "application/javascript"})

    sources = parse_modules(session, identity, "MOCK-VERSION-ID")

    assert sources.main.name == DEFAULT_SCRIPT_NAME == "index.js"
    assert sources.main.type == ModuleType.COMMONJS
    assert sources.main.content == body
    assert sources.modules == []


def test_single_script_ignores_charset_parameter(session, identity):
    session.version_content.return_value = make_response(
        b"addEventListener('fetch', () => {});", {"content-type": "application/javascript; charset=utf-8"}
    )

    sources = parse_modules(session, identity, "MOCK-VERSION-ID")

    assert sources.main.type == ModuleType.COMMONJS


def test_single_script_without_content_type_is_fatal(session, identity):
    session.version_content.return_value = make_response(b"addEventListener('fetch', () => {});", {})

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "No content-type header was provided for non-module Worker content"


def test_unknown_mime_type_is_fatal():
    with pytest.raises(FatalError) as context:
        ModuleType.from_mime_type("image/png")

    assert str(context.value) == "Unsupported mime type: image/png"


def test_form_data_without_boundary_is_fatal(session, identity):
    session.version_content.return_value = make_response(
        b"export default {}", {"content-type": "multipart/form-data", "cf-entrypoint": "index.js"}
    )

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "Got form-data without a multipart boundary"


def test_form_data_part_without_headers_is_fatal(session, identity):
    session.version_content.return_value = make_response(
        b"--worker-content-boundary\r\nno headers here\r\n--worker-content-boundary--\r\n",
        {"content-type": "multipart/form-data; boundary=worker-content-boundary", "cf-entrypoint": "index.js"},
    )

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value).startswith("Could not parse form-data")


def test_form_data_part_without_name_is_fatal(session, identity):
    session.version_content.return_value = multipart_response(
        [(None, "index.js", "application/javascript+module", b"export default {}")],
        entrypoint="index.js",
    )

    with pytest.raises(FatalError) as context:
        parse_modules(session, identity, "MOCK-VERSION-ID")

    assert str(context.value) == "Got a form-data part without a name"
