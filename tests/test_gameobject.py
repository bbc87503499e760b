import gc

from spaceprojeckt.gameobject import GameObject


def test_new_object_is_not_pending_destroy():
    assert GameObject().pending_destroy is False


def test_destroy_marks_pending():
    obj = GameObject()
    obj.destroy()
    assert obj.pending_destroy is True


def test_weak_ref_resolves_to_object():
    obj = GameObject()
    assert obj.weak_ref()() is obj


def test_weak_ref_expires_when_object_freed():
    obj = GameObject()
    ref = obj.weak_ref()
    del obj
    gc.collect()
    assert ref() is None