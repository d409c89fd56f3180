from utils.icon_manager import ICON_CHEVRON_DOWN, ICON_ELLIPSIS, IconManager


def test_icon_cache_round_trip(qapp):
    IconManager.clear_cache()
    icon1 = IconManager.create_icon(ICON_ELLIPSIS, color="#ff9500")
    icon2 = IconManager.create_icon(ICON_ELLIPSIS, color="#ff9500")
    assert icon1 is icon2
    assert not icon1.isNull()
    IconManager.clear_cache()
    icon3 = IconManager.create_icon(ICON_ELLIPSIS, color="#ff9500")
    assert icon1 is not icon3


def test_pixmap_cache_round_trip(qapp):
    IconManager.clear_cache()
    pix1 = IconManager.create_pixmap(ICON_CHEVRON_DOWN, 14, color="#007aff")
    pix2 = IconManager.create_pixmap(ICON_CHEVRON_DOWN, 14, color="#007aff")
    assert pix1 is pix2
    assert not pix1.isNull()


def test_unknown_icon_falls_back_to_empty(qapp):
    IconManager.clear_cache()
    assert IconManager.create_icon("fa5s.no-such-icon-here").isNull()
    assert IconManager.create_pixmap("fa5s.no-such-icon-here", 16).isNull()
