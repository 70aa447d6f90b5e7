"""
Email bodies for the demo scenarios.

Plain f-string templates with inline <style> blocks; every function returns a
complete document (or plain text) ready to hand to the mailer.
"""

from datetime import date


def activation_demo_html() -> str:
    """HTML demo: styled service-activation email that documents the send parameters."""
    return """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
        body, html { margin: 0; padding: 0; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #f9f9f9; }
        .container { max-width: 600px; margin: auto; background-color: #ffffff; border-radius: 10px; overflow: hidden; box-shadow: 0 6px 20px rgba(0,0,0,0.15); }
        .header { background-color: #003366; color: white; padding: 20px; text-align: center; }
        .content { padding: 30px; text-align: left; font-size: 16px; color: #333; }
        .code { background-color: #e8f0fe; padding: 15px; font-family: monospace; color: #0056b3; border-left: 5px solid #0056b3; margin-top: 20px; }
        .footer { background-color: #003366; color: white; padding: 20px; text-align: center; }
        a { color: #FFD700; text-decoration: none; font-weight: bold; }
        a:hover { text-decoration: underline; }
        @media (max-width: 600px) {
            .header, .content, .footer { padding: 15px; }
        }
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Welcome to the gmail-node-mailer Demo!</h1>
        </div>
        <div class="content">
            <p>Hello,</p>
            <p>This email provides a detailed look at how to send HTML formatted messages using the gmail-node-mailer package. Below is an explanation of the parameters you can use:</p>
            <pre class="code">
SendEmailParams {
    recipient_email: str          # The email address of the recipient.
    sender_email: str | None      # Optional. The email address of the sender.
    sender_name: str | None       # Optional. The name of the sender.
    subject: str | None           # Optional. The subject line of the email.
    message: str                  # The HTML content of the email.
    attachments: list[Attachment] # Optional. Files to attach.
}

Attachment {
    filename: str    # Name of the file to be attached.
    mime_type: str   # MIME type of the file.
    content: str     # Base64 encoded content of the file.
}

SendEmailResponse {
    sent: bool                 # Whether the email was successfully sent.
    status: int | None         # HTTP status code of the send email attempt.
    status_text: str | None    # Status text corresponding to the status code.
    response_url: str | None   # URL of the API endpoint used to send the email.
    message: str               # Success or error message.
    gmail_response: Any        # The full response from the Gmail API.
}
            </pre>
            <p>Your account is now fully activated, and you can begin exploring all our features.</p>
        </div>
        <div class="footer">
            <p>Need assistance? Contact us at <a href="mailto:support@gmail-node-mailer-demo.com">support@gmail-node-mailer-demo.com</a></p>
        </div>
    </div>
</body>
</html>
"""


def plain_text_welcome() -> str:
    return """
    Hi there!

    This is a sample plain text email to demonstrate how you can send simple text-based emails using our service. Your subscription is now active, and we're excited to have you onboard!
    Feel free to customize this email content to better fit your needs.
    Welcome to the community!

    Best,
    The Team
    """


# StreamBox welcome email assets
MOVIE_POSTER_URL = "https://res.cloudinary.com/dkfrhzkaf/image/upload/v1713597609/moviePoster.png"
MOVIE_FULL_URL = "https://archive.org/download/short.circuit.1986.2160p/Short.Circuit.1986.2160p.BluRay.Topaz.AMQ.Upscale.x265-SoF.mp4"
TRAILER_URL = "https://dn720400.ca.archive.org/0/items/short-circuit/Short%20Circuit.mp4"


def streambox_welcome_html(
    poster_url: str = MOVIE_POSTER_URL,
    movie_url: str = MOVIE_FULL_URL,
    trailer_url: str = TRAILER_URL,
) -> str:
    """StreamBox welcome email with the featured movie card."""
    return f"""
<!DOCTYPE html>
<html>
<head>
<style>
    .container {{ font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif; max-width: 800px; margin: 20px auto; padding: 0; background-color: #000; color: #fff; border-radius: 8px; overflow: hidden; box-shadow: 0 4px 8px rgba(0,0,0,0.1); }}
    .header {{ background-color: #E50914; padding: 16px 20px; font-size: 24px; font-weight: bold; text-align: center; }}
    .movie-poster {{ display: block; width: 100%; height: auto; }}
    .movie-info {{ background-color: #303030; padding: 10px 20px; text-align: center; }}
    .movie-title {{ font-size: 24px; font-weight: bold; margin-top: 0; }}
    .movie-details {{ font-size: 16px; margin: 5px 0; }}
    .movie-link, .movie-link:visited {{ color: #FFA500; text-decoration: none; font-size: 18px; }}
    footer {{ background-color: #181818; font-size: 18px; text-align: center; padding: 20px; }}
    footer a, footer a:visited {{ color: #FFA500!important; text-decoration: none; }}
</style>
</head>
<body>
<p>Dear Subscriber,</p>
<p>Thank you for signing up for StreamBox! Your subscription is now active.</p>
<p>Dive into your new cinematic adventure with <strong>Short Circuit</strong>, available for streaming right now.</p>
<p>Enjoy your journey with us! Happy streaming!</p>
    <div class="container">
        <div class="header">Welcome to StreamBox!</div>
        <img src="{poster_url}" alt="Short Circuit Movie Poster" class="movie-poster">
        <div class="movie-info">
            <h1 class="movie-title">Short Circuit</h1>
            <p class="movie-details">Rated: PG-13 | Duration: 1h 13min</p>
            <p class="movie-details"><a href="{movie_url}" class="movie-link">Watch Full Movie</a> | <a href="{trailer_url}" class="movie-link">Watch Trailer</a></p>
        </div>
        <footer>
            <p>Need help? Contact us at <a href="mailto:support@streambox.com">support@streambox.com</a></p>
        </footer>
    </div>
</body>
</html>
"""


def streambox_invoice_html(next_billing_date: date) -> str:
    """Invoice document attached to the StreamBox welcome email."""
    return f"""
<html>
<body>
    <h1>StreamBox Subscription Invoice</h1>
    <p>Thank you for subscribing to StreamBox!</p>
    <p>Plan Details:</p>
    <ul>
        <li>Plan Type: Unlimited Streaming</li>
        <li>Monthly Fee: $15.99</li>
        <li>Next Billing Date: {next_billing_date.isoformat()}</li>
    </ul>
    <p>Additional Purchases:</p>
    <ul>
        <li>Free Access to Short Circuit - $0.00</li>
    </ul>
</body>
</html>
"""


def subscription_renewal_html(renewal_date: str) -> str:
    return f"""
<!DOCTYPE html>
<html>
<head>
    <style>
        body {{ font-family: 'Arial', sans-serif; background-color: #f4f4f4; color: #333; }}
        .container {{ max-width: 600px; margin: auto; padding: 20px; background: #fff; border-radius: 8px; }}
        h1 {{ color: #E50914; }}
        p {{ margin: 10px 0; }}
        footer {{ color: #888; font-size: 16px; text-align: center; margin-top: 20px; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>🌟 Welcome Back to StreamBox!</h1>
        <p>Hello,</p>
        <p>We're thrilled to let you know that your StreamBox subscription has been successfully renewed as of <strong>{renewal_date}</strong>.</p>
        <p>Continue enjoying unlimited movies and TV shows without interruption. Attached are your detailed invoice and usage statistics for your records.</p>
        <footer>Thanks for choosing StreamBox! 🎬<br>Contact us anytime at support@streambox.com</footer>
    </div>
</body>
</html>
"""


def usage_stats_text() -> str:
    return "Subscription Period: 2023-04-01 to 2023-04-30\nHours Streamed: 120\nSubscription Fee: $15.99"


def purchase_confirmation_html(recipient_name: str, sender_email: str, base_url: str) -> str:
    """eBook purchase confirmation with a download link served from /files."""
    return f"""
<!DOCTYPE html>
<html>
<head>
<style>
    body {{ font-family: Arial, sans-serif; background-color: #f4f4f4; }}
    .container {{ max-width: 600px; margin: auto; background-color: #ffffff; padding: 20px; box-shadow: 0 0 10px rgba(0,0,0,0.1); }}
    .header {{ background-color: #007bff; color: white; padding: 10px; text-align: center; }}
    .content {{ padding: 20px; text-align: left; line-height: 1.6; color: #333; }}
    .content a {{ color: #007bff; text-decoration: none; }}
    .footer {{ font-size: smaller; text-align: center; padding-top: 10px; color: #787878; }}
</style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>🌟 Welcome to Your New Adventure! 🌟</h1>
        </div>
        <div class="content">
            <p>Dear {recipient_name} 📖,</p>
            <p>🎉 We are delighted to confirm your purchase of the eBook <strong>"The Echoes of Time"</strong>. This thrilling adventure awaits your exploration. 🚀</p>
            <p>🔗 For immediate access to your eBook, please click <a href="{base_url}/files/SampleEBook.epub">here</a>. We have also attached your eBook file to this email for your convenience.</p>
            <p>🤝 Should you require any assistance or have any inquiries, feel free to contact our support team at <a href="mailto:{sender_email}">{sender_email}</a>.</p>
        </div>
        <div class="footer">
            Warm regards,<br>
            <strong>The Book Haven Team 📚</strong><br>
            📧 <a href="mailto:{sender_email}">{sender_email}</a>
        </div>
    </div>
</body>
</html>
"""


def server_status_html(status: str, formatted_time: str) -> str:
    """Server lifecycle notification; wording and icon follow the status."""
    starting = status == "start"
    icon = "🚀" if starting else "🌙"
    heading = "Starting" if starting else "Shutting Down"
    state = "currently starting up" if starting else "currently shutting down"
    change = "activation" if starting else "deactivation"

    return f"""
<!DOCTYPE html>
<html>
<head>
    <style>
        body, html {{ margin: 0; padding: 0; font-family: 'Helvetica Neue', Arial, sans-serif; background-color: #f4f4f4; }}
        .container {{ background-color: #ffffff; padding: 20px; border-radius: 10px; box-shadow: 0 4px 12px rgba(0,0,0,0.15); }}
        .header {{ background-color: #E0EFFF; padding: 20px; border-radius: 8px 8px 0 0; text-align: center; }}
        h1 {{ color: #0A3E5D; font-size: 28px; margin: 0; }}
        .status-details {{ background-color: #F8F8F8; padding: 20px; border-radius: 5px; margin-top: 20px; color: #333; }}
        p {{ font-size: 16px; line-height: 1.5; margin: 10px 0; }}
        .status-update {{ font-weight: 600; }}
        footer {{ font-size: 16px; text-align: center; padding: 20px; border-top: 1px solid #ccc; margin-top: 20px; }}
        a, .support-link {{ color: #0A3E5D; text-decoration: none; font-weight: 600; }}
        .status-icon {{ font-size: 48px; vertical-align: middle; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1><span class="status-icon">{icon}</span> Server {heading}</h1>
        </div>
        <div class="status-details">
            <p>The server is {state} as of {formatted_time}.</p>
            <p class="status-update">This email confirms the {change} of the server processes. For more details, please check the server dashboard or contact support if you notice any issues.</p>
        </div>
        <footer>
            <p>Need help? <a href="mailto:support@somnuslabs.com" class="support-link">Contact support</a> if you have any concerns or require assistance.</p>
        </footer>
    </div>
</body>
</html>
"""
