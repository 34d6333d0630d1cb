"""Sound effect registry.

Python never decodes or plays audio. The board tracks which clips are
playing and queues cues that the browser viewer turns into sound.
"""


class SoundClip:
    __slots__ = ("filename", "loop", "playing", "position", "plays")

    def __init__(self, filename):
        self.filename = filename
        self.loop = False
        self.playing = False
        self.position = 0.0
        self.plays = 0


class SoundBoard:
    def __init__(self):
        self._clips = {}
        self._cues = []

    def play(self, filename, loop=False):
        """Start `filename` from the beginning, optionally looping."""
        clip = self._clips.get(filename)
        if clip is None:
            clip = self._clips[filename] = SoundClip(filename)
        clip.position = 0.0
        clip.loop = loop
        clip.playing = True
        clip.plays += 1
        self._cues.append({"kind": "sound", "action": "play", "file": filename, "loop": loop})

    def stop(self, filename):
        """Stop and rewind `filename`. Clips never played are ignored."""
        clip = self._clips.get(filename)
        if clip is None:
            return
        clip.playing = False
        clip.position = 0.0
        self._cues.append({"kind": "sound", "action": "stop", "file": filename, "loop": clip.loop})

    def get(self, filename):
        return self._clips.get(filename)

    def drain(self):
        cues, self._cues = self._cues, []
        return cues
