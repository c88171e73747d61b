"""UI translations (English, Hindi, Tamil)."""

from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES = {
    "en": "English",
    "hi": "हिन्दी",
    "ta": "தமிழ்",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "app.name": "Endecoder",
        "app.tagline": "Base64 encoder and decoder for text, files and images",
        "tabs.textEncode": "Text Encode",
        "tabs.textDecode": "Text Decode",
        "tabs.imageEncode": "Image Encode",
        "tabs.imageDecode": "Image Decode",
        "textEncoder.input": "Text to encode",
        "textEncoder.placeholder": "Type or paste text to encode...",
        "textEncoder.output": "Base64 output",
        "textEncoder.encodeButton": "Encode",
        "textDecoder.input": "Base64 to decode",
        "textDecoder.placeholder": "Paste Base64 data to decode...",
        "textDecoder.output": "Decoded text",
        "textDecoder.decodeButton": "Decode",
        "imageEncoder.input": "Image",
        "imageEncoder.output": "Base64 image data",
        "imageDecoder.input": "Base64 image data",
        "imageDecoder.placeholder": "Paste Base64 image data or a data URL...",
        "imageDecoder.uploadText": "Upload text file",
        "imageDecoder.output": "Decoded image",
        "imageDecoder.noValidImage": "No valid image found in the Base64 data.",
        "imageDecoder.enterValidData": "Enter valid Base64 image data to see a preview.",
        "common.upload": "Upload file",
        "common.download": "Download",
        "common.file": "File",
        "common.samples": "Language samples",
        "common.status": "Status",
        "common.ready": "Ready.",
        "preview.title": "Preview",
        "preview.none": "No preview available for this file type.",
        "snippet.title": "Code snippet",
        "snippet.language": "Language",
        "history.title": "History",
        "history.search": "Search history",
        "history.clearAll": "Clear all",
        "history.delete": "Delete selected",
        "history.restore": "Restore selected",
        "history.noHistory": "No history yet.",
        "history.noResults": "No matching history items.",
        "history.encoded": "Encoded",
        "history.decoded": "Decoded",
        "history.input": "Input",
        "history.output": "Output",
        "history.time": "Time",
        "history.cleared": "History cleared.",
        "history.deleted": "History item deleted.",
        "history.restored": "History item restored.",
        "history.selectFirst": "Select a history item first.",
        "header.theme": "Toggle theme",
        "header.language": "Interface language",
        "notice.encoded": "Text encoded.",
        "notice.decoded": "Base64 decoded.",
        "notice.encodeError": "Text could not be encoded as UTF-8.",
        "notice.invalidBase64": "Invalid Base64 input",
        "notice.emptyInput": "Nothing to convert.",
        "notice.fileLoaded": "File loaded: {name}",
        "notice.imageLoaded": "Image loaded: {name}",
        "notice.textFileLoaded": "Text file loaded: {name}",
        "notice.fileError": "Error processing file",
        "notice.imageError": "Error processing image",
        "notice.notImage": "Please select an image file",
        "notice.noBase64InFile": "File does not contain valid Base64 data",
        "notice.tooLarge": "File is too large ({size}, limit {limit})",
        "notice.downloadReady": "File ready for download",
        "notice.downloadFailed": "Failed to download file",
        "notice.nothingToDownload": "Nothing to download yet.",
        "notice.themeSwitched": "Switched to {theme} mode",
    },
    "hi": {
        "app.name": "Endecoder",
        "app.tagline": "टेक्स्ट, फ़ाइलों और छवियों के लिए Base64 एनकोडर और डिकोडर",
        "tabs.textEncode": "टेक्स्ट एनकोड",
        "tabs.textDecode": "टेक्स्ट डिकोड",
        "tabs.imageEncode": "छवि एनकोड",
        "tabs.imageDecode": "छवि डिकोड",
        "textEncoder.input": "एनकोड करने के लिए टेक्स्ट",
        "textEncoder.placeholder": "एनकोड करने के लिए टेक्स्ट लिखें या पेस्ट करें...",
        "textEncoder.output": "Base64 परिणाम",
        "textEncoder.encodeButton": "एनकोड करें",
        "textDecoder.input": "डिकोड करने के लिए Base64",
        "textDecoder.placeholder": "डिकोड करने के लिए Base64 डेटा पेस्ट करें...",
        "textDecoder.output": "डिकोड किया गया टेक्स्ट",
        "textDecoder.decodeButton": "डिकोड करें",
        "imageEncoder.input": "छवि",
        "imageEncoder.output": "Base64 छवि डेटा",
        "imageDecoder.input": "Base64 छवि डेटा",
        "imageDecoder.placeholder": "Base64 छवि डेटा या data URL पेस्ट करें...",
        "imageDecoder.uploadText": "टेक्स्ट फ़ाइल अपलोड करें",
        "imageDecoder.output": "डिकोड की गई छवि",
        "imageDecoder.noValidImage": "Base64 डेटा में कोई मान्य छवि नहीं मिली।",
        "common.upload": "फ़ाइल अपलोड करें",
        "common.download": "डाउनलोड",
        "common.file": "फ़ाइल",
        "common.samples": "भाषा नमूने",
        "common.status": "स्थिति",
        "common.ready": "तैयार।",
        "preview.title": "पूर्वावलोकन",
        "preview.none": "इस फ़ाइल प्रकार के लिए कोई पूर्वावलोकन उपलब्ध नहीं है।",
        "snippet.title": "कोड स्निपेट",
        "snippet.language": "भाषा",
        "history.title": "इतिहास",
        "history.search": "इतिहास खोजें",
        "history.clearAll": "सब हटाएँ",
        "history.delete": "चयनित हटाएँ",
        "history.restore": "चयनित पुनर्स्थापित करें",
        "history.noHistory": "अभी कोई इतिहास नहीं है।",
        "history.noResults": "कोई मेल खाता आइटम नहीं मिला।",
        "history.encoded": "एनकोड किया गया",
        "history.decoded": "डिकोड किया गया",
        "history.input": "इनपुट",
        "history.output": "आउटपुट",
        "history.time": "समय",
        "history.cleared": "इतिहास साफ़ किया गया।",
        "history.deleted": "इतिहास आइटम हटाया गया।",
        "history.restored": "इतिहास आइटम पुनर्स्थापित किया गया।",
        "history.selectFirst": "पहले कोई इतिहास आइटम चुनें।",
        "header.theme": "थीम बदलें",
        "header.language": "इंटरफ़ेस भाषा",
        "notice.encoded": "टेक्स्ट एनकोड हो गया।",
        "notice.decoded": "Base64 डिकोड हो गया।",
        "notice.invalidBase64": "अमान्य Base64 इनपुट",
        "notice.emptyInput": "बदलने के लिए कुछ नहीं है।",
        "notice.fileLoaded": "फ़ाइल लोड हुई: {name}",
        "notice.imageLoaded": "छवि लोड हुई: {name}",
        "notice.textFileLoaded": "टेक्स्ट फ़ाइल लोड हुई: {name}",
        "notice.fileError": "फ़ाइल संसाधित करने में त्रुटि",
        "notice.imageError": "छवि संसाधित करने में त्रुटि",
        "notice.notImage": "कृपया एक छवि फ़ाइल चुनें",
        "notice.noBase64InFile": "फ़ाइल में मान्य Base64 डेटा नहीं है",
        "notice.tooLarge": "फ़ाइल बहुत बड़ी है ({size}, सीमा {limit})",
        "notice.downloadReady": "फ़ाइल डाउनलोड के लिए तैयार है",
        "notice.downloadFailed": "फ़ाइल डाउनलोड विफल",
        "notice.nothingToDownload": "अभी डाउनलोड करने के लिए कुछ नहीं है।",
        "notice.themeSwitched": "{theme} मोड पर स्विच किया गया",
    },
    "ta": {
        "app.name": "Endecoder",
        "app.tagline": "உரை, கோப்புகள் மற்றும் படங்களுக்கான Base64 குறியாக்கி",
        "tabs.textEncode": "உரை குறியாக்கம்",
        "tabs.textDecode": "உரை குறிவிலக்கம்",
        "tabs.imageEncode": "பட குறியாக்கம்",
        "tabs.imageDecode": "பட குறிவிலக்கம்",
        "textEncoder.input": "குறியாக்க வேண்டிய உரை",
        "textEncoder.placeholder": "குறியாக்க உரையை உள்ளிடவும் அல்லது ஒட்டவும்...",
        "textEncoder.output": "Base64 வெளியீடு",
        "textEncoder.encodeButton": "குறியாக்கு",
        "textDecoder.input": "குறிவிலக்க வேண்டிய Base64",
        "textDecoder.placeholder": "Base64 தரவை ஒட்டவும்...",
        "textDecoder.output": "குறிவிலக்கப்பட்ட உரை",
        "textDecoder.decodeButton": "குறிவிலக்கு",
        "imageEncoder.input": "படம்",
        "imageEncoder.output": "Base64 பட தரவு",
        "imageDecoder.input": "Base64 பட தரவு",
        "imageDecoder.output": "குறிவிலக்கப்பட்ட படம்",
        "common.upload": "கோப்பை பதிவேற்று",
        "common.download": "பதிவிறக்கு",
        "common.file": "கோப்பு",
        "common.samples": "மொழி மாதிரிகள்",
        "common.status": "நிலை",
        "common.ready": "தயார்.",
        "preview.title": "முன்னோட்டம்",
        "snippet.title": "குறியீட்டு துணுக்கு",
        "history.title": "வரலாறு",
        "history.search": "வரலாற்றில் தேடு",
        "history.clearAll": "அனைத்தையும் அழி",
        "history.noHistory": "இன்னும் வரலாறு இல்லை.",
        "history.encoded": "குறியாக்கப்பட்டது",
        "history.decoded": "குறிவிலக்கப்பட்டது",
        "history.input": "உள்ளீடு",
        "history.output": "வெளியீடு",
        "notice.invalidBase64": "தவறான Base64 உள்ளீடு",
        "notice.fileLoaded": "கோப்பு ஏற்றப்பட்டது: {name}",
        "notice.fileError": "கோப்பை செயலாக்குவதில் பிழை",
    },
}


class Translator:
    """Look up UI strings for one language, falling back to English."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language if language in TRANSLATIONS else DEFAULT_LANGUAGE

    def __call__(self, key: str, **kwargs: object) -> str:
        text = TRANSLATIONS[self.language].get(key) or TRANSLATIONS[DEFAULT_LANGUAGE].get(key, key)
        return text.format(**kwargs) if kwargs else text
