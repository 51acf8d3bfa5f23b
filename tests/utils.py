import json

import requests

BOUNDARY = "worker-content-boundary"


def make_response(content: bytes, headers: dict, status_code: int = 200, url: str = "https://mock-api/x") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Bad Request"
    response._content = content
    response.headers.update(headers)
    response.url = url
    response.encoding = "utf-8"
    return response


def envelope_response(result, success: bool = True, errors=None, status_code: int = 200) -> requests.Response:
    body = {"success": success, "errors": errors or [], "messages": [], "result": result}
    return make_response(
        json.dumps(body).encode(), {"content-type": "application/json"}, status_code=status_code
    )


def multipart_response(parts, entrypoint=None) -> requests.Response:
    """parts: (field name, file name, content type, content) tuples."""
    chunks = []
    for name, filename, content_type, content in parts:
        disposition = "form-data" if name is None else f'form-data; name="{name}"'
        if filename:
            disposition += f'; filename="{filename}"'
        head = f"--{BOUNDARY}\r\nContent-Disposition: {disposition}\r\nContent-Type: {content_type}\r\n\r\n"
        chunks.append(head.encode() + content + b"\r\n")
    chunks.append(f"--{BOUNDARY}--\r\n".encode())
    headers = {"content-type": f"multipart/form-data; boundary={BOUNDARY}"}
    if entrypoint is not None:
        headers["cf-entrypoint"] = entrypoint
    return make_response(b"".join(chunks), headers)


def upload_metadata(files) -> dict:
    name, (filename, content, content_type) = files[0]
    assert name == "metadata" and content_type == "application/json"
    return json.loads(content)
