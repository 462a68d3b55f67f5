import qrcode
from io import BytesIO
from PIL import Image


def generate_qr_png(data: str, size: int = 200) -> bytes:
    """
    Generate a QR code PNG for the given data string.

    Args:
        data (str): The data to encode in the QR code, e.g. a coupon code.
        size (int): The desired width and height of the image in pixels.

    Returns:
        bytes: The encoded PNG image.
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img_pil = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    if size:
        img_pil = img_pil.resize((size, size), Image.Resampling.NEAREST)

    img_bytes = BytesIO()
    img_pil.save(img_bytes, format="PNG")
    return img_bytes.getvalue()
