from pathlib import Path

import pytest

from tg_schema.models import Schema
from tg_schema.parsers.html_parser import BotApiHtmlParser


def _anchor(name: str) -> str:
    return (
        f'<a class="anchor" name="{name.lower()}" href="#{name.lower()}">'
        '<i class="anchor-icon"></i></a>'
    )


def _table(headers: list[str], rows: list[list[str]]) -> str:
    head = "".join(f"<th>{h}</th>" for h in headers)
    body = "\n".join(
        "<tr>\n" + "\n".join(f"<td>{cell}</td>" for cell in row) + "\n</tr>"
        for row in rows
    )
    return (
        '<table class="table">\n'
        f"<thead>\n<tr>\n{head}\n</tr>\n</thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>\n"
    )


FIELDS = ["Field", "Type", "Description"]
PARAMS = ["Parameter", "Type", "Required", "Description"]


def _build_page() -> str:
    """A trimmed copy of the Bot API page layout, deterministic."""
    parts = [
        "<!DOCTYPE html>\n<html>\n<head><title>Telegram Bot API</title></head>\n<body>\n",
        '<div id="dev_page_content">\n',
        "<p>The Bot API is an HTTP-based interface created for developers.</p>\n",
        f"<h3>{_anchor('recent-changes')}Recent changes</h3>\n",
        "<blockquote>\n<p>Subscribe to @BotNews to be the first to know.</p>\n</blockquote>\n",
        f"<h4>{_anchor('march-31-2024')}March 31, 2024</h4>\n",
        "<p><strong>Bot API 7.2</strong></p>\n",
        "<ul>\n<li>Added support for business accounts.</li>\n"
        "<li>Added the method <a href=\"#getbusinessconnection\">getBusinessConnection</a>.</li>\n</ul>\n",
        f"<h4>{_anchor('february-16-2024')}February 16, 2024</h4>\n",
        "<p><strong>Bot API 7.1</strong></p>\n",
        "<ul>\n<li>Added support for boosts.</li>\n</ul>\n",
        '<p><a href="/bots/api-changelog">See earlier changes »</a></p>\n',
        f"<h3>{_anchor('authorizing-your-bot')}Authorizing your bot</h3>\n",
        "<p>Each bot is given a unique authentication token.</p>\n",
        f"<h3>{_anchor('available-types')}Available types</h3>\n",
        "<p>All types used in the Bot API responses are represented as JSON-objects.</p>\n",
        f"<h4>{_anchor('user')}User</h4>\n",
        "<p>This object represents a Telegram user or bot.</p>\n",
        _table(
            FIELDS,
            [
                ["id", "Integer", "Unique identifier for this user or bot. A 64-bit integer is safe for storing this identifier."],
                ["is_bot", "Boolean", "True, if this user is a bot"],
                ["first_name", "String", "User's or bot's first name"],
                ["username", "String", "<em>Optional</em>. User's or bot's username"],
                ["can_join_groups", "Boolean", "<em>Optional</em>. True, if the bot can be invited to groups."],
            ],
        ),
        f"<h4>{_anchor('message')}Message</h4>\n",
        "<p>This object represents a message.</p>\n",
        _table(
            FIELDS,
            [
                ["message_id", "Integer", "Unique message identifier inside this chat"],
                ["from", '<a href="#user">User</a>', "<em>Optional</em>. Sender of the message"],
                ["photo", 'Array of <a href="#photosize">PhotoSize</a>', "<em>Optional</em>. Message is a photo, available sizes of the photo"],
                ["entities", 'Array of <a href="#messageentity">MessageEntity</a>', "<em>Optional</em>. Special entities in the text"],
            ],
        ),
        f"<h4>{_anchor('callbackgame')}CallbackGame</h4>\n",
        "<p>A placeholder, currently holds no information.</p>\n",
        f"<h4>{_anchor('inlinekeyboardmarkup')}InlineKeyboardMarkup</h4>\n",
        "<p>This object represents an inline keyboard.</p>\n",
        "<p>Note: buttons are shown below the message.</p>\n",
        _table(
            FIELDS,
            [
                ["inline_keyboard", 'Array of Array of <a href="#inlinekeyboardbutton">InlineKeyboardButton</a>', "Array of button rows"],
            ],
        ),
        f"<h4>{_anchor('location')}Location</h4>\n",
        "<p>This object represents a point on the map.</p>\n",
        _table(
            FIELDS,
            [
                ["latitude", "Float", "Latitude as defined by sender"],
                ["horizontal_accuracy", "Float number", "<em>Optional</em>. The radius of uncertainty"],
            ],
        ),
        f"<h4>{_anchor('inputfile')}InputFile</h4>\n",
        "<p>This object represents the contents of a file to be uploaded.</p>\n",
        f"<h4>{_anchor('sending-files')}Sending files</h4>\n",
        "<p>There are three ways to send files.</p>\n",
        f"<h3>{_anchor('available-methods')}Available methods</h3>\n",
        "<p>All methods in the Bot API are case-insensitive.</p>\n",
        f"<h4>{_anchor('getme')}getMe</h4>\n",
        "<p>A simple method for testing your bot's authentication token. Requires no parameters. "
        "Returns basic information about the bot in form of a <a href=\"#user\">User</a> object.</p>\n",
        f"<h4>{_anchor('sendmessage')}sendMessage</h4>\n",
        "<p>Use this method to send text messages. On success, the sent "
        "<a href=\"#message\">Message</a> is returned.</p>\n",
        _table(
            PARAMS,
            [
                ["chat_id", "Integer or String", "Yes", "Unique identifier for the target chat or username of the target channel"],
                ["text", "String", "Yes", "Text of the message to be sent"],
                ["parse_mode", "String", "Optional", "Mode for parsing entities in the message text."],
                ["reply_markup", '<a href="#inlinekeyboardmarkup">InlineKeyboardMarkup</a>', "Optional", "Additional interface options."],
            ],
        ),
        f"<h4>{_anchor('formatting-options')}Formatting options</h4>\n",
        "<p>The Bot API supports basic formatting for messages.</p>\n",
        f"<h4>{_anchor('sendphoto')}sendPhoto</h4>\n",
        "<p>Use this method to send photos. On success, the sent "
        "<a href=\"#message\">Message</a> is returned.</p>\n",
        _table(
            PARAMS,
            [
                ["chat_id", "Integer or String", "Yes", "Unique identifier for the target chat"],
                ["photo", '<a href="#inputfile">InputFile</a> or String', "Yes", "Photo to send."],
            ],
        ),
        f"<h4>{_anchor('getchatmembercount')}getChatMemberCount</h4>\n",
        "<p>Use this method to get the number of members in a chat. Returns <em>Int</em> on success.</p>\n",
        _table(
            PARAMS,
            [["chat_id", "Integer or String", "Yes", "Unique identifier for the target chat"]],
        ),
        f"<h3>{_anchor('updating-messages')}Updating messages</h3>\n",
        "<p>The following methods allow you to change an existing message.</p>\n",
        "</div>\n</body>\n</html>\n",
    ]
    return "".join(parts)


@pytest.fixture(scope="module")
def page_html() -> str:
    return _build_page()


@pytest.fixture(scope="module")
def page_path(tmp_path_factory: pytest.TempPathFactory, page_html: str) -> Path:
    path: Path = tmp_path_factory.mktemp("pages") / "Telegram Bot API.html"
    path.write_text(page_html, encoding="utf-8")
    return path


@pytest.fixture(scope="module")
def parsed_page(page_html: str) -> Schema:
    """Parse the sample page once, reuse across tests."""
    return BotApiHtmlParser().parse(page_html)
