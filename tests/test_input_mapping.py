from grabber.input import InputAction, InputMapper, direction_for


def test_default_mapping_movement_arrows_and_wasd():
    mapper = InputMapper.default()

    assert mapper.translate_key("UP") == InputAction.MOVE_UP
    assert mapper.translate_key("W") == InputAction.MOVE_UP
    # Case-insensitive
    assert mapper.translate_key("w") == InputAction.MOVE_UP

    assert mapper.translate_key("DOWN") == InputAction.MOVE_DOWN
    assert mapper.translate_key("s") == InputAction.MOVE_DOWN

    assert mapper.translate_key("LEFT") == InputAction.MOVE_LEFT
    assert mapper.translate_key("a") == InputAction.MOVE_LEFT

    assert mapper.translate_key("right") == InputAction.MOVE_RIGHT
    assert mapper.translate_key("D") == InputAction.MOVE_RIGHT


def test_ascii_key_codes_in_both_cases():
    mapper = InputMapper.default()

    assert mapper.translate_key(119) == InputAction.MOVE_UP  # 'w'
    assert mapper.translate_key(87) == InputAction.MOVE_UP  # 'W'
    assert mapper.translate_key(115) == InputAction.MOVE_DOWN
    assert mapper.translate_key(83) == InputAction.MOVE_DOWN
    assert mapper.translate_key(97) == InputAction.MOVE_LEFT
    assert mapper.translate_key(65) == InputAction.MOVE_LEFT
    assert mapper.translate_key(100) == InputAction.MOVE_RIGHT
    assert mapper.translate_key(68) == InputAction.MOVE_RIGHT


def test_unbound_and_invalid_keys():
    mapper = InputMapper.default()
    assert mapper.translate_key("Q") is None
    assert mapper.translate_key("") is None
    assert mapper.translate_key(None) is None


def test_alias_registration_for_backend_codes():
    mapper = InputMapper.default()
    # pyglet reports the up arrow as 65362
    mapper.set_alias(65362, "UP")
    assert mapper.translate_key(65362) == InputAction.MOVE_UP


def test_rebinding_changes_behavior():
    mapper = InputMapper.default()

    mapper.bind("J", InputAction.MOVE_LEFT)
    assert mapper.translate_key("j") == InputAction.MOVE_LEFT

    mapper.unbind("A")
    assert mapper.translate_key("A") is None


def test_directions_are_unit_vectors_with_y_down():
    assert direction_for(InputAction.MOVE_UP) == (0, -1)
    assert direction_for(InputAction.MOVE_DOWN) == (0, 1)
    assert direction_for(InputAction.MOVE_LEFT) == (-1, 0)
    assert direction_for(InputAction.MOVE_RIGHT) == (1, 0)
    assert direction_for(None) is None
