import pytest

from tgbot_types.reply_markup import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardButtonKind,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    to_reply_markup,
)


def test_plain_keyboard_button_has_only_text():
    assert KeyboardButton("hi").to_json() == {"text": "hi"}


def test_keyboard_button_request_contact():
    button = KeyboardButton("phone", request_contact=True)
    assert button.to_json() == {"text": "phone", "request_contact": True}


def test_keyboard_button_request_location():
    button = KeyboardButton("where", request_location=True)
    assert button.to_json() == {"text": "where", "request_location": True}


def test_keyboard_button_cannot_request_both():
    with pytest.raises(ValueError):
        KeyboardButton("x", request_contact=True, request_location=True)


def test_reply_keyboard_defaults_skip_false_flags():
    markup = ReplyKeyboardMarkup()
    assert markup.to_json() == {"keyboard": []}


def test_reply_keyboard_rows_accept_strings():
    markup = ReplyKeyboardMarkup([["a", KeyboardButton("b")]])
    assert markup.to_json() == {"keyboard": [[{"text": "a"}, {"text": "b"}]]}


def test_reply_keyboard_add_row_returns_stored_row():
    markup = ReplyKeyboardMarkup()
    row = markup.add_empty_row()
    row.append(KeyboardButton("late"))
    assert markup.to_json()["keyboard"] == [[{"text": "late"}]]


def test_reply_keyboard_flags():
    markup = ReplyKeyboardMarkup(
        resize_keyboard=True, one_time_keyboard=True, selective=True
    )
    markup.add_row(["x"])
    assert markup.to_json() == {
        "keyboard": [[{"text": "x"}]],
        "resize_keyboard": True,
        "one_time_keyboard": True,
        "selective": True,
    }


def test_reply_keyboard_rejects_other_values():
    with pytest.raises(TypeError):
        ReplyKeyboardMarkup([[42]])


def test_reply_keyboard_remove():
    assert ReplyKeyboardRemove().to_json() == {"remove_keyboard": True}
    assert ReplyKeyboardRemove(selective=True).to_json() == {
        "remove_keyboard": True,
        "selective": True,
    }


def test_force_reply():
    assert ForceReply().to_json() == {"force_reply": True}
    assert ForceReply(selective=True).to_json()["selective"] is True


def test_inline_callback_button():
    button = InlineKeyboardButton.callback("press", "payload")
    assert button.kind is InlineKeyboardButtonKind.CALLBACK_DATA
    assert button.to_json() == {"text": "press", "callback_data": "payload"}


def test_inline_url_button():
    button = InlineKeyboardButton.url("open", "https://example.com/")
    assert button.to_json() == {"text": "open", "url": "https://example.com/"}


def test_inline_markup_rows():
    markup = InlineKeyboardMarkup()
    row = markup.add_row([InlineKeyboardButton.callback("a", "1")])
    row.append(InlineKeyboardButton.callback("b", "2"))
    markup.add_empty_row()
    assert markup.to_json() == {
        "inline_keyboard": [
            [
                {"text": "a", "callback_data": "1"},
                {"text": "b", "callback_data": "2"},
            ],
            [],
        ]
    }


def test_inline_markup_rejects_non_buttons():
    with pytest.raises(TypeError):
        InlineKeyboardMarkup().add_row(["text"])


@pytest.mark.parametrize(
    "markup",
    [InlineKeyboardMarkup(), ReplyKeyboardMarkup(), ReplyKeyboardRemove(), ForceReply()],
)
def test_to_reply_markup_passes_markup_through(markup):
    assert to_reply_markup(markup) is markup


def test_to_reply_markup_from_rows():
    button = InlineKeyboardButton.url("go", "https://example.com/")
    markup = to_reply_markup([[button]])
    assert isinstance(markup, InlineKeyboardMarkup)
    assert markup.inline_keyboard == [[button]]


def test_to_reply_markup_rejects_other_values():
    with pytest.raises(TypeError):
        to_reply_markup("keyboard")