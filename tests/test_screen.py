from squidbox.screen import CHECKMARK_BITMAP, X_BITMAP, Screen


def _lit(screen):
    return {
        (x, y)
        for x in range(Screen.WIDTH)
        for y in range(Screen.HEIGHT)
        if screen.pixel(x, y)
    }


def test_new_screen_is_blank():
    screen = Screen()
    assert _lit(screen) == set()
    assert screen.text_at(0) == ""


def test_fill_rect_sets_exact_area():
    screen = Screen()
    screen.fill_rect(2, 3, 4, 5, True)
    lit = _lit(screen)
    assert lit == {(x, y) for x in range(2, 6) for y in range(3, 8)}
    screen.fill_rect(2, 3, 4, 5, False)
    assert _lit(screen) == set()


def test_draw_rect_leaves_interior_off():
    screen = Screen()
    screen.draw_rect(10, 10, 5, 4, True)
    assert screen.pixel(10, 10) and screen.pixel(14, 13)
    assert screen.pixel(14, 10) and screen.pixel(10, 13)
    assert not screen.pixel(12, 11)
    assert not screen.pixel(15, 10)


def test_drawing_is_clipped():
    screen = Screen()
    screen.fill_rect(120, 60, 20, 20, True)
    assert screen.pixel(Screen.WIDTH - 1, Screen.HEIGHT - 1)
    assert not screen.pixel(Screen.WIDTH, Screen.HEIGHT - 1)
    assert not screen.pixel(-1, 0)


def test_checkmark_bitmap():
    screen = Screen()
    screen.draw_bitmap(0, 0, CHECKMARK_BITMAP, 8, 8)
    lit = _lit(screen)
    assert (7, 1) in lit
    assert (0, 4) in lit and (4, 4) in lit
    assert (0, 0) not in lit


def test_x_bitmap_is_both_diagonals():
    screen = Screen()
    screen.draw_bitmap(Screen.WIDTH - 8, 0, X_BITMAP, 8, 8)
    lit = _lit(screen)
    expected = {(Screen.WIDTH - 8 + i, i) for i in range(8)}
    expected |= {(Screen.WIDTH - 1 - i, i) for i in range(8)}
    assert lit == expected


def test_write_lines():
    screen = Screen()
    screen.write("Hi\nYo")
    assert screen.text_at(0) == "Hi"
    assert screen.text_at(1) == "Yo"


def test_set_cursor_and_integer_character():
    screen = Screen()
    screen.set_cursor(0, 8)
    screen.write(27)
    screen.write("Menu")
    assert screen.text_at(1) == chr(27) + "Menu"
    assert screen.text_at(0) == ""


def test_text_wraps_at_screen_edge():
    screen = Screen()
    screen.write("x" * 22)
    assert screen.text_at(0) == "x" * 21
    assert screen.text_at(1) == "x"


def test_fill_rect_erases_text_only_where_it_covers():
    screen = Screen()
    screen.write("top\nbottom")
    screen.fill_rect(0, 0, Screen.WIDTH, 8, False)
    assert screen.text_at(0) == ""
    assert screen.text_at(1) == "bottom"


def test_clear_and_update():
    screen = Screen()
    screen.fill_rect(0, 0, 3, 3, True)
    screen.write("abc")
    screen.update()
    assert screen.frames == 1
    assert screen.shown[0] == 1
    screen.clear()
    assert _lit(screen) == set()
    assert screen.text_at(0) == ""
    assert screen.shown[0] == 1
    screen.update()
    assert screen.frames == 2
    assert not any(screen.shown)