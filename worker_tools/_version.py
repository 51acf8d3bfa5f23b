from importlib.metadata import PackageNotFoundError, version


def get_versions():
    try:
        return {"version": version("worker-tools")}
    except PackageNotFoundError:
        return {"version": "0+unknown"}
