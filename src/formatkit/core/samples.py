"""Built-in sample documents, one per language."""

from __future__ import annotations

from formatkit.core.engine import coerce_language
from formatkit.core.models import Language

SAMPLES: dict[Language, str] = {
    Language.JSON: (
        '{"name":"John Doe","age":30,"city":"New York",'
        '"hobbies":["reading","coding","traveling"],'
        '"address":{"street":"123 Main St","zipCode":"10001"}}'
    ),
    Language.TYPESCRIPT: (
        "interface User{name:string;age:number;email:string;}"
        'const user:User={name:"John",age:30,email:"john@example.com"};'
        "function greetUser(user:User):string{return `Hello, ${user.name}!`;}"
    ),
    Language.XML: (
        '<?xml version="1.0" encoding="UTF-8"?><users>'
        '<user id="1"><name>John Doe</name><email>john@example.com</email>'
        "<active>true</active></user>"
        '<user id="2"><name>Jane Smith</name><email>jane@example.com</email>'
        "<active>false</active></user></users>"
    ),
    Language.CSS: (
        "body{margin:0;padding:0;font-family:Arial,sans-serif;}"
        ".header{background-color:#333;color:white;padding:20px;}"
        ".container{max-width:1200px;margin:0 auto;padding:20px;}"
    ),
    Language.HTML: (
        '<!DOCTYPE html><html lang="en"><head><meta charset="UTF-8" />'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0" />'
        "<title>Example</title></head><body>"
        '<header class="header"><h1>Welcome</h1></header>'
        '<main class="container"><p>This is a sample HTML document.</p></main>'
        "</body></html>"
    ),
}


def get_sample(language: Language | str) -> str:
    return SAMPLES[coerce_language(language)]
