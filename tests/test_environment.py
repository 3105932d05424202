from sdk_probe.environment import read_sdk_environment, render_environment


def test_unset_variable_reports_absent_marker(monkeypatch):
    monkeypatch.delenv("ANDROID_HOME", raising=False)
    monkeypatch.setenv("ANDROID_SDK_ROOT", "C:\\Android")

    values = read_sdk_environment(["ANDROID_HOME", "ANDROID_SDK_ROOT"])

    assert values == {"ANDROID_HOME": None, "ANDROID_SDK_ROOT": "C:\\Android"}
    assert render_environment(values) == [
        "ANDROID_HOME: <unset>",
        "ANDROID_SDK_ROOT: 'C:\\Android'",
    ]


def test_raw_value_is_not_normalized():
    values = read_sdk_environment(["ANDROID_HOME"], environ={"ANDROID_HOME": " C:\\Android "})

    assert render_environment(values) == ["ANDROID_HOME: ' C:\\Android '"]
