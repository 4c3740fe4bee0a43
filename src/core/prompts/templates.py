"""Prompt templates for every flow.

Paths use the Python field names of the input models in `core.domain.models`.
"""

from __future__ import annotations

from core.prompts.renderer import Each, IfPresent, Join, Value, seq

QUOTE_ANALYSIS_TEMPLATE = seq(
    "You are an expert hiring assistant. Your goal is to help a client make an informed decision "
    "by analyzing the quotes they have received for a job.\n\n",
    "Analyze the following job and the quotes received:\n\n",
    "**Job Details:**\n",
    "- Title: ", Value("job_details.title"), "\n",
    "- Description: ", Value("job_details.description"), "\n\n",
    "**Quotes Received:**\n",
    Each(
        "quotes",
        seq(
            "- **Quote ID:** ", Value("id"), "\n",
            "  - **Provider:** ", Value("provider_details.business_name"),
            " (Rating: ", Value("provider_details.rating"),
            "/5 from ", Value("provider_details.reviews_count"),
            " reviews, ", Value("provider_details.years_of_experience"), " years exp)\n",
            "  - **Amount:** ", Value("currency"), " ", Value("amount"), "\n",
            "  - **Provider's Message:** \"", Value("message_to_client"), "\"\n",
        ),
    ),
    "\nYour task is to provide a structured analysis.\n",
    "1.  **Overall Summary:** Write a brief, neutral, two-sentence summary of the quotes.\n",
    "2.  **Pros and Cons:** For each quote, create a list of pros and cons. Consider factors like price, "
    "provider rating, experience, and the content of their message (e.g., did they sound confident, "
    "ask good questions?). Include exactly one entry per Quote ID listed above.\n",
    "3.  **Best Value Recommendation:** Based on all factors, recommend the quote that represents the best "
    "overall value, not necessarily the lowest price. Return the ID of that quote.\n\n",
    "Your output must be a JSON object matching the specified schema.\n",
)

SMART_LEADS_TEMPLATE = seq(
    "You are an expert recruitment assistant for service providers (\"Fundis\"). Your goal is to find the "
    "most relevant and profitable job leads for a specific Fundi based on their profile.\n\n",
    "Analyze the following Fundi's profile:\n",
    "- Name: ", Value("provider_profile.business_name"), "\n",
    "- Main Service: ", Value("provider_profile.main_service"), "\n",
    "- Location: ", Value("provider_profile.location"), "\n",
    "- Specialties: ", Join("provider_profile.specialties"), "\n",
    "- Skills: ", Join("provider_profile.skills"), "\n",
    "- Bio: ", Value("provider_profile.bio"), "\n\n",
    "Now, review this list of available jobs:\n",
    Each(
        "available_jobs",
        seq(
            "- Job ID: ", Value("id"), "\n",
            "  - Title: ", Value("title"), "\n",
            "  - Category: ", Value("service_category"), "\n",
            "  - Location: ", Value("location"), "\n",
            "  - Budget: ",
            IfPresent(
                "budget",
                seq(Value("currency"), " ", Value("budget")),
                seq("Not specified"),
                falsy_is_absent=True,
            ),
            "\n",
            "  - Description: ", Value("description"), "\n",
        ),
    ),
    "\nFrom the list, identify the top 5 BEST job leads for this Fundi. A good match considers:\n",
    "1.  **Service Alignment:** The job's category, title, and description must align with the provider's "
    "main service, specialties, and skills.\n",
    "2.  **Location Proximity:** The job's location should be reasonably close to the provider's location.\n",
    "3.  **Keyword Match:** Keywords in the job description should match the provider's skills and bio.\n\n",
    "For each of the top matches (at most 5), provide the job ID, a concise reason for the match, and a "
    "confidence score from 0 to 100. Return your response as a JSON array, sorted from the highest "
    "confidence score to the lowest.\n",
)

JOB_TRIAGE_TEMPLATE = seq(
    "You are an expert artisan and diagnostician with years of experience in home and commercial repairs "
    "in Kenya. Your task is to analyze a client's job request and provide a \"Smart Ticket\" for another "
    "artisan.\n\n",
    "The Smart Ticket should help the artisan prepare for the job, minimizing wasted trips by suggesting "
    "necessary tools and parts.\n\n",
    "Analyze the following job request:\n\n",
    "- Service Category: ", Value("service_category"), "\n",
    "- Job Title: ", Value("job_title"), "\n",
    "- Job Description: ", Value("job_description"), "\n\n",
    "Based on this information, provide a structured analysis. Be specific and practical. For example, for "
    "a \"leaky kitchen tap,\" don't just say \"plumbing tools;\" suggest \"basin wrench,\" \"adjustable "
    "pliers,\" and \"screwdriver set.\" For parts, suggest \"faucet O-ring kit\" or a specific cartridge "
    "model if possible.\n\n",
    "Your output must be a JSON object matching the specified schema.\n",
)

SMART_MATCH_TEMPLATE = seq(
    "You are an AI assistant designed to provide smart match suggestions for service providers based on "
    "user requirements.\n\n",
    "You will receive a job description, the user's location, preferred criteria, and a list of available "
    "providers. Each provider in the list has an 'id' field.\n",
    "Your task is to analyze the information and return a list of the best service providers. For each "
    "suggested provider, you MUST include their original 'id' as 'providerId' in your response, along with "
    "a brief 'reason' for the suggestion. Do not include the provider's name in the output, only their ID "
    "and the reason.\n\n",
    "Job Description: ", Value("job_description"), "\n",
    "Location: ", Value("location"), "\n",
    "Preferred Criteria: ", Value("preferred_criteria"), "\n\n",
    "Available Providers:\n",
    Each(
        "available_providers",
        seq(
            "- ID: ", Value("id"),
            ", Name: ", Value("name"),
            ", Profile: ", Value("profile"),
            ", Location: ", Value("location"),
            ", Experience: ", Value("experience"),
            ", Certifications: ", Join("certifications"),
            ", Rating: ", Value("rating"), "\n",
        ),
    ),
    "\nBased on the above information, which service providers are the best matches? For each match, "
    "provide their 'id' (as 'providerId') and a 'reason'.\n\n",
    "Format your response as a JSON array.\n",
)
