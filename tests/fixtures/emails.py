"""
Sample email data for testing.

This module contains various .eml file samples as bytes for testing:
- Plain text emails (declared, undeclared and unknown charsets)
- Latin-1 HTML emails
- Multipart emails with text and binary leaves
- Nested multiparts and attached messages
- Base64, quoted-printable and uuencoded text bodies
"""

# Simple plain text email
SIMPLE_PLAIN_TEXT_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Test Email
Date: Wed, 12 Feb 2026 10:30:00 +0100
Message-ID: <test123@example.com>
Content-Type: text/plain; charset="utf-8"

Hello, this is a simple test email.

Thank you.
"""

# Multipart with one text leaf and one image leaf
MULTIPART_TEXT_AND_IMAGE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Text and image
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="BOUNDARY"

--BOUNDARY
Content-Type: text/plain; charset="UTF-8"

abc
def

--BOUNDARY
Content-Type: image/png
Content-Transfer-Encoding: base64
Content-Disposition: attachment; filename="dot.png"

iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA
60e6kgAAAABJRU5ErkJggg==

--BOUNDARY--
"""

# HTML part in ISO-8859-1 with a raw 0xE9 byte
LATIN1_HTML_EML = (
    b"From: sender@example.com\n"
    b"To: recipient@example.com\n"
    b"Subject: Latin-1\n"
    b"MIME-Version: 1.0\n"
    b"Content-Type: text/html; charset=ISO-8859-1\n"
    b"Content-Transfer-Encoding: 8bit\n"
    b"\n"
    b"<p>caf\xe9 cr\xe8me</p>\n"
)

# No charset declared, body is Latin-1 (invalid as UTF-8)
NO_CHARSET_EML = (
    b"From: sender@example.com\n"
    b"To: recipient@example.com\n"
    b"Subject: No charset\n"
    b"Content-Type: text/plain\n"
    b"Content-Transfer-Encoding: 8bit\n"
    b"\n"
    b"caf\xe9\n"
    b"na\xefve\n"
)

# Declared charset Python does not know
UNKNOWN_CHARSET_EML = (
    b"From: sender@example.com\n"
    b"To: recipient@example.com\n"
    b"Subject: Unknown charset\n"
    b"Content-Type: text/plain; charset=x-no-such-charset\n"
    b"Content-Transfer-Encoding: 8bit\n"
    b"\n"
    b"r\xe9sum\xe9\n"
)

# Declared UTF-8 but body is not valid UTF-8
INVALID_UTF8_EML = (
    b"From: sender@example.com\n"
    b"To: recipient@example.com\n"
    b"Subject: Broken\n"
    b"Content-Type: text/plain; charset=utf-8\n"
    b"Content-Transfer-Encoding: 8bit\n"
    b"\n"
    b"caf\xe9\n"
)

# Base64 encoded UTF-8 text ("Caffè e cornetto\n")
BASE64_TEXT_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Base64 text
Content-Type: text/plain; charset="utf-8"
Content-Transfer-Encoding: base64

Q2FmZsOoIGUgY29ybmV0dG8K
"""

# Quoted-printable Latin-1 text ("Prix: déjà payé = oui\n")
QUOTED_PRINTABLE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: QP text
Content-Type: text/plain; charset="iso-8859-1"
Content-Transfer-Encoding: quoted-printable

Prix: d=E9j=E0 pay=E9 =3D oui
"""

# Text part in a transfer encoding that cannot be decoded
UUENCODED_TEXT_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Uuencoded
Content-Type: text/plain; charset="us-ascii"
Content-Transfer-Encoding: x-uuencode

begin 644 hello.txt
&:&5L;&\\*
`
end
"""

# multipart/mixed > (multipart/alternative > text/plain, text/html),
# text/xml, message/rfc822 > text/plain
NESTED_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Nested
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="OUTER"

--OUTER
Content-Type: multipart/alternative; boundary="INNER"

--INNER
Content-Type: text/plain; charset="us-ascii"

plain body

--INNER
Content-Type: text/html; charset="us-ascii"

<p>html body</p>

--INNER--

--OUTER
Content-Type: text/xml; charset="us-ascii"

<doc>xml body</doc>

--OUTER
Content-Type: message/rfc822

From: forwarded@example.com
Subject: Forwarded
Content-Type: text/plain; charset="us-ascii"

forwarded body

--OUTER--
"""

SAMPLE_EMAILS = {
    "simple_plain_text": SIMPLE_PLAIN_TEXT_EML,
    "multipart_text_and_image": MULTIPART_TEXT_AND_IMAGE_EML,
    "latin1_html": LATIN1_HTML_EML,
    "no_charset": NO_CHARSET_EML,
    "unknown_charset": UNKNOWN_CHARSET_EML,
    "invalid_utf8": INVALID_UTF8_EML,
    "base64_text": BASE64_TEXT_EML,
    "quoted_printable": QUOTED_PRINTABLE_EML,
    "uuencoded_text": UUENCODED_TEXT_EML,
    "nested": NESTED_EML,
}
