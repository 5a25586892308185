import qrcode
import qrcode.image.svg


def generate_qr_svg(url: str) -> str:
    """SVG с QR-кодом для ссылки на документ"""
    image = qrcode.make(url, image_factory=qrcode.image.svg.SvgPathImage, box_size=4, border=2)
    return image.to_string(encoding="unicode")
