from app.config import AppConfig, default_config
from core.landmark_slots import LandmarkSlots
from utils.constants import POLL_INTERVAL


def test_defaults():
    assert default_config.poll_interval == POLL_INTERVAL
    assert default_config.mirror is True
    assert default_config.reject_stale_results is True
    assert default_config.max_num_hands == 2


def test_override_per_instance():
    cfg = AppConfig(camera_device=2, reject_stale_results=False)
    assert cfg.camera_device == 2
    assert default_config.camera_device == 0
    slots = LandmarkSlots(reject_stale=cfg.reject_stale_results)
    slots.update_hands([], seq=5)
    assert slots.update_hands([], seq=1)
