import types

from multilang_keyboard.speech import Speaker


class DummyEngine:
    def __init__(self, voices, fail=False):
        self.voices = voices
        self.fail = fail
        self.props = {}
        self.said = []
    def getProperty(self, name):
        if name == "voices":
            return self.voices
        return self.props.get(name)
    def setProperty(self, name, value):
        self.props[name] = value
    def say(self, text):
        if self.fail:
            raise RuntimeError("no driver")
        self.said.append(text)
    def runAndWait(self):
        pass


def _voice(voice_id, *languages):
    return types.SimpleNamespace(id=voice_id, languages=list(languages))


def test_picks_voice_for_locale():
    engine = DummyEngine([_voice("english", b"\x05en-us"), _voice("hindi", "hi_IN")])
    Speaker(engine=engine).say("नमस्ते", "hi-IN")
    assert engine.props["voice"] == "hindi"
    assert engine.said == ["नमस्ते"]


def test_falls_back_to_same_language_voice():
    engine = DummyEngine([_voice("gb", "en-GB")])
    assert Speaker(engine=engine).voice_for("en-US") == "gb"


def test_default_voice_when_nothing_matches():
    engine = DummyEngine([_voice("english", "en-US")])
    speaker = Speaker(engine=engine)
    assert speaker.voice_for("ta-IN") is None
    speaker.say("வணக்கம்", "ta-IN")
    assert "voice" not in engine.props
    assert engine.said == ["வணக்கம்"]


def test_engine_failure_is_logged(caplog):
    engine = DummyEngine([], fail=True)
    Speaker(engine=engine).say("hello", "en-US")
    assert any("Speech failed" in r.getMessage() for r in caplog.records)
