from __future__ import annotations

import pytest

from mdchunk.core.links import extract_images
from mdchunk.core.links import extract_links
from mdchunk.core.links import extract_urls_and_images
from mdchunk.core.links import restore_links


def test_link_and_image_in_one_sentence():
    text = "See [OpenAI](https://openai.com) and ![logo](https://x.com/logo.png)."
    content, urls, images = extract_urls_and_images(text)

    assert content == "See [OpenAI]({$url0}) and ![logo]({$img0})."
    assert urls == ["https://openai.com"]
    assert images == ["https://x.com/logo.png"]


def test_indices_count_up_in_appearance_order():
    text = "[a](u1) ![x](i1) [b](u2) ![](i2) [c](u3)"
    content, urls, images = extract_urls_and_images(text)

    assert content == "[a]({$url0}) ![x]({$img0}) [b]({$url1}) ![]({$img1}) [c]({$url2})"
    assert urls == ["u1", "u2", "u3"]
    assert images == ["i1", "i2"]


def test_link_pass_leaves_image_markers_alone():
    content, images = extract_images("![alt](pic.png)")
    content, urls = extract_links(content)
    assert content == "![alt]({$img0})"
    assert urls == []


def test_linked_image_keeps_image_target():
    content, urls, images = extract_urls_and_images("[![badge](b.svg)](https://ci)")
    assert images == ["b.svg"]
    assert "{$img0}" in content
    assert restore_links(content, urls, images) == "[![badge](b.svg)](https://ci)"


def test_no_markup_is_untouched():
    text = "plain [brackets] and (parens) but [](empty) text"
    assert extract_urls_and_images(text) == (text, [], [])


def test_restore_round_trip():
    text = "Intro [one](http://a/1) ![p](p.png)\nmore [two](http://a/2)"
    content, urls, images = extract_urls_and_images(text)
    assert restore_links(content, urls, images) == text


def test_restore_rejects_dangling_placeholder():
    with pytest.raises(IndexError):
        restore_links("[x]({$url3})", ["only-one"], [])
