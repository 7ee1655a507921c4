"""
Playback state of simulated camera feeds.
"""
import threading
from enum import Enum
from typing import Dict

from ....common.exceptions import FeedStateError

class FeedState(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    RECONNECTING = "reconnecting"

class FeedCommand(str, Enum):
    PLAY = "play"
    PAUSE = "pause"
    TOGGLE = "toggle"
    RECONNECT = "reconnect"
    RECONNECTED = "reconnected"

class FeedSession:
    """
    State machine driven by explicit commands:

        playing <-> paused        (play / pause / toggle)
        any     --> reconnecting  (reconnect)
        reconnecting --> playing  (reconnected)
    """
    def __init__(self, state: FeedState = FeedState.PLAYING):
        self.state = state

    def apply(self, command: FeedCommand) -> FeedState:
        command = FeedCommand(command)

        if command == FeedCommand.RECONNECT:
            self.state = FeedState.RECONNECTING
        elif command == FeedCommand.RECONNECTED:
            if self.state != FeedState.RECONNECTING:
                raise FeedStateError(f"Feed is {self.state.value}, not reconnecting")
            self.state = FeedState.PLAYING
        elif self.state == FeedState.RECONNECTING:
            raise FeedStateError(f"Cannot {command.value} while reconnecting")
        elif command == FeedCommand.PLAY:
            self.state = FeedState.PLAYING
        elif command == FeedCommand.PAUSE:
            self.state = FeedState.PAUSED
        else:
            self.state = FeedState.PAUSED if self.state == FeedState.PLAYING else FeedState.PLAYING

        return self.state

class FeedManager:
    """Feed sessions per registry camera id, created on first access."""

    def __init__(self):
        self._sessions: Dict[int, FeedSession] = {}
        self._lock = threading.Lock()

    def session(self, camera_id: int) -> FeedSession:
        with self._lock:
            if camera_id not in self._sessions:
                self._sessions[camera_id] = FeedSession()
            return self._sessions[camera_id]

    def apply(self, camera_id: int, command: FeedCommand) -> FeedState:
        session = self.session(camera_id)
        with self._lock:
            return session.apply(command)

    def discard(self, camera_id: int):
        with self._lock:
            self._sessions.pop(camera_id, None)
