from mag_arena.audio import AudioAction, GameAudio, Sound


def _recording_audio(**sounds):
    calls = []
    audio = GameAudio(backend=lambda action, sound: calls.append((action, sound)), **sounds)
    return audio, calls


def test_default_sounds_are_empty_and_not_played():
    audio, calls = _recording_audio()
    assert audio.play(audio.shoot) is False
    assert audio.play(audio.enemy_explode) is False
    assert calls == []


def test_loaded_sound_is_played():
    shot = Sound("shoot", 1200)
    audio, calls = _recording_audio(shoot=shot)
    assert audio.play(audio.shoot) is True
    assert calls == [(AudioAction.PLAY, shot)]


def test_sound_loaded_flag():
    assert Sound("x", 1).loaded is True
    assert Sound("x").loaded is False


def test_music_without_data_is_not_streamed():
    audio, calls = _recording_audio()
    assert audio.update_music() is False
    assert audio.restart_music() is False
    assert calls == []


def test_music_streams_and_restarts_when_loaded():
    track = Sound("theme", 44100)
    audio, calls = _recording_audio(background_music=track)
    assert audio.update_music() is True
    assert audio.restart_music() is True
    assert calls == [(AudioAction.STREAM, track), (AudioAction.RESTART, track)]


def test_nothing_plays_after_close():
    shot = Sound("shoot", 10)
    track = Sound("theme", 10)
    audio, calls = _recording_audio(shoot=shot, background_music=track)
    audio.close()
    assert audio.device_ready is False
    assert audio.play(shot) is False
    assert audio.update_music() is False
    assert calls == []